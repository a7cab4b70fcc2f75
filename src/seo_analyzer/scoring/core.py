# src/seo_analyzer/scoring/core.py
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..config import AnalyzerConfig
from ..model import AnalysisInput, Assessment, Category, ContentStatistics, Rating

# (rating, message) or None when the rule does not apply to this input
AssessResult = Optional[Tuple[Rating, str]]
AssessFunc = Callable[[AnalysisInput, ContentStatistics, AnalyzerConfig], AssessResult]

RATING_VALUES: Dict[str, float] = {"good": 1.0, "ok": 0.5, "bad": 0.0}


class RuleDefinition:
    """
    Configuration object binding a rule id to its category, weight and assess function.
    A rule is data: the scorer treats every definition the same way.
    """

    __slots__ = ("id", "category", "weight", "assess", "requires_keyword")

    def __init__(
            self,
            rule_id: str,
            category: Category,
            weight: float,
            assess: AssessFunc,
            requires_keyword: bool = False
    ):
        self.id = rule_id
        self.category = category
        self.weight = weight
        self.assess = assess
        self.requires_keyword = requires_keyword

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "category": self.category,
            "weight": self.weight,
            "requiresKeyword": self.requires_keyword,
        }

    def __repr__(self) -> str:
        return f"RuleDefinition({self.id!r}, {self.category!r}, weight={self.weight})"


def composite_score(assessments: Iterable[Assessment]) -> int:
    """
    Weighted average of the rating values on a 0-100 scale.

    Args:
        assessments (Iterable[Assessment]): The assessments of one category.

    Returns:
        int: round(100 * sum(weight * value) / sum(weight)), or 0 when nothing was assessed.
    """
    total_weight = 0.0
    weighted = 0.0
    for assessment in assessments:
        total_weight += assessment.weight
        weighted += assessment.weight * RATING_VALUES[assessment.rating]

    if total_weight <= 0:
        return 0
    return max(0, min(100, round(100 * weighted / total_weight)))
