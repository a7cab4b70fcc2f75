# src/seo_analyzer/model.py
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

Category = Literal["seo", "readability"]
Rating = Literal["good", "ok", "bad"]
OverallRating = Literal["good", "ok", "needs-improvement"]
Priority = Literal["high", "medium", "low"]

HEADING_KEYS: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")


def empty_heading_count() -> Dict[str, int]:
    """Returns a heading histogram with all six levels present and zeroed."""
    return {key: 0 for key in HEADING_KEYS}


class CamelModel(BaseModel):
    """
    Base for every engine model.
    Attributes are snake_case in Python and camelCase on the wire (metaDescription, seoScore, ...).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisInput(CamelModel):
    """
    Everything a caller hands to the engine for one analysis.
    Strict types: a non-string content fails validation instead of being coerced.
    """
    model_config = ConfigDict(frozen=True)

    content: StrictStr
    title: Optional[StrictStr] = None
    meta_description: Optional[StrictStr] = None
    keyword: Optional[StrictStr] = None
    related_keywords: Tuple[StrictStr, ...] = ()
    is_cornerstone: StrictBool = False

    @property
    def focus_keyword(self) -> Optional[str]:
        """The keyword stripped of surrounding whitespace, or None when it is blank."""
        if self.keyword is None:
            return None
        stripped = self.keyword.strip()
        return stripped or None


class LinkCount(CamelModel):
    internal: int = 0
    external: int = 0


class ContentStatistics(CamelModel):
    """
    Raw metrics derived from the content (and focus keyword).

    Keyword fields stay None when no keyword was given. The Flesch score stays None
    when there are no words or no sentences.
    """
    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    syllable_count: int = 0
    complex_word_count: int = 0

    average_sentence_length: float = 0.0
    average_paragraph_length: float = 0.0
    passive_voice_percentage: float = 0.0
    transition_word_percentage: float = 0.0
    complex_word_percentage: float = 0.0

    # --- Focus keyword ---
    keyword_count: Optional[int] = None
    keyword_density: Optional[float] = None
    keyword_in_introduction: Optional[bool] = None
    keyword_in_h1: Optional[bool] = None
    keyword_subheading_count: Optional[int] = None
    # Related keyphrases found in the text; None when none were requested
    related_keywords_found: Optional[List[str]] = None

    # --- Structure ---
    heading_count: Dict[str, int] = Field(default_factory=empty_heading_count)
    heading_levels: List[int] = Field(default_factory=list)
    link_count: LinkCount = Field(default_factory=LinkCount)
    image_count: int = 0
    images_missing_alt: int = 0

    # Word counts per sentence / paragraph, in document order
    sentence_lengths: List[int] = Field(default_factory=list)
    paragraph_lengths: List[int] = Field(default_factory=list)

    flesch_reading_ease: Optional[float] = None
    reading_time_minutes: int = 0

    @property
    def images_with_alt(self) -> int:
        return self.image_count - self.images_missing_alt


class Assessment(CamelModel):
    """One evaluated rule: its rating, feedback message and weight in the composite score."""
    id: str
    category: Category
    rating: Rating
    message: str
    weight: float


class Recommendation(CamelModel):
    """An actionable fix derived from a 'bad' assessment."""
    assessment_id: str
    priority: Priority
    action: str
    impact: str


class ContentQuality(CamelModel):
    """Share of met content quality factors, separate from the technical SEO score."""
    score: int = 0
    factors: Dict[str, bool] = Field(default_factory=dict)


class EatScore(CamelModel):
    """Expertise, authoritativeness and trustworthiness signals on a 0-100 scale."""
    score: int = 0
    expertise: int = 0
    authority: int = 0
    trust: int = 0


class AnalysisResult(CamelModel):
    seo_score: int
    readability_score: int
    overall_rating: OverallRating
    assessments: List[Assessment] = Field(default_factory=list)
    statistics: ContentStatistics
    recommendations: List[Recommendation] = Field(default_factory=list)
    content_quality: ContentQuality = Field(default_factory=ContentQuality)
    eat: EatScore = Field(default_factory=EatScore)

    @property
    def seo_assessments(self) -> List[Assessment]:
        return [a for a in self.assessments if a.category == "seo"]

    @property
    def readability_assessments(self) -> List[Assessment]:
        return [a for a in self.assessments if a.category == "readability"]

    def get_assessment(self, assessment_id: str) -> Optional[Assessment]:
        """Returns the assessment with the given rule id, or None if the rule was skipped."""
        return next((a for a in self.assessments if a.id == assessment_id), None)
