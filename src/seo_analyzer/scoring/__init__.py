from .core import RATING_VALUES, RuleDefinition, composite_score
from .insights import (
    build_recommendations,
    content_quality,
    eat_score,
    overall_rating,
    rating_color,
    score_color,
)
from .registry import RULES, get_rule, get_rules
from .scorer import Scorer

__all__ = [
    "RATING_VALUES",
    "RULES",
    "RuleDefinition",
    "Scorer",
    "build_recommendations",
    "composite_score",
    "content_quality",
    "eat_score",
    "get_rule",
    "get_rules",
    "overall_rating",
    "rating_color",
    "score_color",
]
