# src/seo_analyzer/engine.py
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .config import DEFAULT_CONFIG, AnalyzerConfig
from .exceptions import AnalysisInputError
from .metrics.statistics import StatisticsExtractor
from .model import AnalysisInput, AnalysisResult, ContentStatistics
from .normalizer.builder import ContentNormalizer
from .scoring.insights import rating_color, score_color
from .scoring.scorer import Scorer

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    """Condenses pydantic's error list into one line: 'content: Input should be a valid string; ...'."""
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "input"
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def to_analysis_input(data: Union[AnalysisInput, Mapping[str, Any]]) -> AnalysisInput:
    """
    Validates raw input into an AnalysisInput.

    Accepts an AnalysisInput as-is, or a mapping with snake_case or camelCase keys
    (e.g. a decoded JSON body).

    Raises:
        AnalysisInputError: If the input is not a mapping or fails validation.
    """
    if isinstance(data, AnalysisInput):
        return data
    if not isinstance(data, Mapping):
        raise AnalysisInputError(
            f"Analysis input must be a mapping or AnalysisInput, got {type(data).__name__}"
        )
    try:
        return AnalysisInput.model_validate(dict(data))
    except ValidationError as e:
        raise AnalysisInputError(f"Invalid analysis input: {_format_validation_error(e)}") from e


class SEOAnalyzer:
    """
    Content scoring engine.

    Runs one synchronous pass per call: ContentNormalizer -> StatisticsExtractor -> Scorer.
    An instance only holds its configuration, so it can be shared between threads.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.normalizer = ContentNormalizer(site_domain=self.config.site_domain)
        self.extractor = StatisticsExtractor()
        self.scorer = Scorer(self.config)

    def analyze(self, data: Union[AnalysisInput, Mapping[str, Any]]) -> AnalysisResult:
        """
        Scores content for SEO and readability.

        Args:
            data: An AnalysisInput or a mapping with content, title, metaDescription,
                keyword, relatedKeywords and isCornerstone.

        Returns:
            AnalysisResult: Both composite scores, the assessments, statistics and recommendations.

        Raises:
            AnalysisInputError: If the input violates the contract (e.g. non-string content).
        """
        analysis_input = to_analysis_input(data)
        stats = self._statistics(
            analysis_input.content,
            analysis_input.focus_keyword,
            analysis_input.related_keywords,
        )
        result = self.scorer.score(analysis_input, stats)

        logger.debug(
            f"Analyzed {stats.word_count} words: seo={result.seo_score}, "
            f"readability={result.readability_score}, overall={result.overall_rating}"
        )
        return result

    def analyze_statistics(self, content: str, keyword: Optional[str] = None) -> ContentStatistics:
        """
        Computes the raw statistics only, without scoring.

        Raises:
            AnalysisInputError: If content is not a string or keyword is neither a string nor None.
        """
        if not isinstance(content, str):
            raise AnalysisInputError(f"content must be a string, got {type(content).__name__}")
        if keyword is not None and not isinstance(keyword, str):
            raise AnalysisInputError(f"keyword must be a string, got {type(keyword).__name__}")
        return self._statistics(content, keyword.strip() if keyword else None)

    def _statistics(self, content: str, keyword: Optional[str], related_keywords=()) -> ContentStatistics:
        normalized = self.normalizer.normalize(content)
        return self.extractor.extract(normalized, keyword, related_keywords)

    # --- Display helpers ---

    @staticmethod
    def score_color(score: int) -> str:
        return score_color(score)

    @staticmethod
    def rating_color(rating: str) -> str:
        return rating_color(rating)


def analyze(
        data: Union[AnalysisInput, Mapping[str, Any]],
        config: Optional[AnalyzerConfig] = None
) -> AnalysisResult:
    """Module-level entry point; see SEOAnalyzer.analyze."""
    return SEOAnalyzer(config).analyze(data)


def analyze_statistics(
        content: str,
        keyword: Optional[str] = None,
        site_domain: Optional[str] = None
) -> ContentStatistics:
    """Module-level entry point; see SEOAnalyzer.analyze_statistics."""
    config = AnalyzerConfig(site_domain=site_domain) if site_domain else DEFAULT_CONFIG
    return SEOAnalyzer(config).analyze_statistics(content, keyword)
