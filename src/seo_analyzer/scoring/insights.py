# src/seo_analyzer/scoring/insights.py
"""
Presentation helpers on top of the scores: overall rating, display colours, the content
quality and E-A-T summaries, and a prioritised list of fixes for the failing assessments.
"""
from typing import Dict, Iterable, List, Sequence

from ..model import Assessment, ContentQuality, EatScore, OverallRating, Priority, Recommendation
from .core import RATING_VALUES

MAX_RECOMMENDATIONS = 10
GOOD_READABILITY_SCORE = 60

# Rule ids feeding each E-A-T signal
EXPERTISE_RULES = ("text-length", "related-keywords", "flesch-reading-ease")
AUTHORITY_RULES = ("external-links", "heading-structure")
TRUST_RULES = ("meta-description-length",)

_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}
_IMPACT = {
    "high": "Critical for search visibility and readers",
    "medium": "Noticeable improvement to rankings or readability",
    "low": "Nice to have",
}


def overall_rating(seo_score: int, readability_score: int) -> OverallRating:
    """Rates the average of both scores: >= 80 good, >= 60 ok, otherwise needs-improvement."""
    average = (seo_score + readability_score) / 2
    if average >= 80:
        return "good"
    if average >= 60:
        return "ok"
    return "needs-improvement"


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "orange"
    return "red"


def rating_color(rating: str) -> str:
    return {"good": "green", "ok": "orange", "bad": "red"}.get(rating, "gray")


def priority_for_weight(weight: float) -> Priority:
    if weight >= 1.3:
        return "high"
    if weight >= 1.0:
        return "medium"
    return "low"


def _action_text(message: str) -> str:
    if message.startswith(("Add", "Create")):
        return message
    return f"Fix: {message}"


def build_recommendations(assessments: Iterable[Assessment]) -> List[Recommendation]:
    """
    Turns every 'bad' assessment into a Recommendation.

    Args:
        assessments (Iterable[Assessment]): Assessments in evaluation order.

    Returns:
        List[Recommendation]: At most MAX_RECOMMENDATIONS items, high priority first;
        evaluation order is kept within one priority.
    """
    recommendations = []
    for assessment in assessments:
        if assessment.rating != "bad":
            continue
        priority = priority_for_weight(assessment.weight)
        recommendations.append(Recommendation(
            assessment_id=assessment.id,
            priority=priority,
            action=_action_text(assessment.message),
            impact=_IMPACT[priority],
        ))

    # sorted() is stable, so table order survives inside each priority
    recommendations = sorted(recommendations, key=lambda r: _PRIORITY_ORDER[r.priority])
    return recommendations[:MAX_RECOMMENDATIONS]


# --- Content quality & E-A-T ---

def content_quality(assessments: Sequence[Assessment], readability_score: int) -> ContentQuality:
    """
    Checks five quality factors and scores the share that is met.

    A factor whose rule was skipped (e.g. keyword density without a keyword) counts as
    met; only an explicit 'bad' rating fails it.
    """
    ratings = {a.id: a.rating for a in assessments}
    factors: Dict[str, bool] = {
        "comprehensiveContent": ratings.get("text-length") == "good",
        "goodReadability": readability_score >= GOOD_READABILITY_SCORE,
        "properStructure": ratings.get("heading-structure") != "bad",
        "keywordOptimized": ratings.get("keyword-density") != "bad",
        "hasLinks": ratings.get("internal-links") != "bad",
    }
    met = sum(1 for value in factors.values() if value)
    return ContentQuality(score=round(100 * met / len(factors)), factors=factors)


def _signal(ratings: Dict[str, str], rule_ids: Sequence[str]) -> int:
    # Skipped rules contribute 0
    values = [RATING_VALUES.get(ratings.get(rule_id, ""), 0.0) for rule_id in rule_ids]
    return round(100 * sum(values) / len(values))


def eat_score(assessments: Sequence[Assessment]) -> EatScore:
    """
    Expertise (depth and readability), authority (sources and structure) and trust
    (meta description), each the mean rating value of its rules on a 0-100 scale.
    """
    ratings = {a.id: a.rating for a in assessments}
    expertise = _signal(ratings, EXPERTISE_RULES)
    authority = _signal(ratings, AUTHORITY_RULES)
    trust = _signal(ratings, TRUST_RULES)
    return EatScore(
        score=round((expertise + authority + trust) / 3),
        expertise=expertise,
        authority=authority,
        trust=trust,
    )
