# src/seo_analyzer/scoring/scorer.py
import logging
from typing import List, Optional, Sequence

from ..config import DEFAULT_CONFIG, AnalyzerConfig
from ..model import AnalysisInput, AnalysisResult, Assessment, ContentStatistics
from .core import RuleDefinition, composite_score
from .insights import build_recommendations, content_quality, eat_score, overall_rating
from .registry import RULES

logger = logging.getLogger(__name__)


class Scorer:
    """
    Runs the rule table against one input and its statistics.

    Keyword rules are skipped entirely when no focus keyword is set, so they add
    no weight to the score's denominator. Rules that return None are skipped too.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None, rules: Sequence[RuleDefinition] = RULES):
        self.config = config or DEFAULT_CONFIG
        self.rules = tuple(rules)

    def assess(self, data: AnalysisInput, stats: ContentStatistics) -> List[Assessment]:
        """
        Evaluates every applicable rule in table order.

        Args:
            data (AnalysisInput): The validated input.
            stats (ContentStatistics): Statistics extracted from data.content.

        Returns:
            List[Assessment]: One assessment per applicable rule.
        """
        has_keyword = stats.keyword_count is not None
        assessments = []

        for rule in self.rules:
            if rule.requires_keyword and not has_keyword:
                continue

            outcome = rule.assess(data, stats, self.config)
            if not outcome:
                continue

            rating, message = outcome
            assessments.append(Assessment(
                id=rule.id,
                category=rule.category,
                rating=rating,
                message=message,
                weight=rule.weight,
            ))

        return assessments

    def score(self, data: AnalysisInput, stats: ContentStatistics) -> AnalysisResult:
        """
        Builds the full result: assessments, both composite scores, overall rating,
        recommendations and the content quality and E-A-T summaries.
        """
        assessments = self.assess(data, stats)

        seo_score = composite_score(a for a in assessments if a.category == "seo")
        readability_score = composite_score(a for a in assessments if a.category == "readability")

        logger.debug(
            f"Scored {len(assessments)} assessments: seo={seo_score}, readability={readability_score}"
        )

        return AnalysisResult(
            seo_score=seo_score,
            readability_score=readability_score,
            overall_rating=overall_rating(seo_score, readability_score),
            assessments=assessments,
            statistics=stats,
            recommendations=build_recommendations(assessments),
            content_quality=content_quality(assessments, readability_score),
            eat=eat_score(assessments),
        )
