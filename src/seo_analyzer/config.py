# src/seo_analyzer/config.py
import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class KeywordThresholds(BaseModel):
    min_density: float = 0.5
    max_density: float = 3.0
    # Above this density the text reads as keyword stuffing
    stuffing_density: float = 4.0


class LengthRange(BaseModel):
    min_length: int
    max_length: int


class ContentThresholds(BaseModel):
    min_words: int = 300
    cornerstone_min_words: int = 900
    # Fraction of the minimum that still rates 'ok'
    ok_ratio: float = 0.8


class SEOThresholds(BaseModel):
    keyword: KeywordThresholds = Field(default_factory=KeywordThresholds)
    meta_description: LengthRange = Field(default_factory=lambda: LengthRange(min_length=120, max_length=156))
    title: LengthRange = Field(default_factory=lambda: LengthRange(min_length=30, max_length=60))
    content: ContentThresholds = Field(default_factory=ContentThresholds)
    related_keywords_good_coverage: float = 80.0
    related_keywords_ok_coverage: float = 60.0


class SentenceThresholds(BaseModel):
    max_words: int = 20
    max_long_percentage: float = 25.0
    ok_long_percentage: float = 30.0


class ParagraphThresholds(BaseModel):
    max_words: int = 150
    ok_long_percentage: float = 20.0


class ReadabilityThresholds(BaseModel):
    sentence: SentenceThresholds = Field(default_factory=SentenceThresholds)
    paragraph: ParagraphThresholds = Field(default_factory=ParagraphThresholds)
    passive_voice_max_percentage: float = 10.0
    passive_voice_ok_percentage: float = 15.0
    transition_words_min_percentage: float = 30.0
    transition_words_ok_percentage: float = 24.0
    flesch_good_score: float = 70.0
    flesch_ok_score: float = 50.0
    complex_words_max_percentage: float = 10.0
    complex_words_ok_percentage: float = 15.0


class AnalyzerConfig(BaseModel):
    """
    Thresholds and collaborators for one SEOAnalyzer.

    Defaults mirror the product's tuned bands. The site domain decides which absolute
    links count as internal; without one every absolute link is external.
    """
    site_domain: Optional[str] = None
    seo: SEOThresholds = Field(default_factory=SEOThresholds)
    readability: ReadabilityThresholds = Field(default_factory=ReadabilityThresholds)

    @field_validator("site_domain", mode="before")
    @classmethod
    def normalize_domain(cls, v: Any) -> Optional[str]:
        """Accepts 'example.com', 'www.example.com' or a full URL and keeps the bare hostname."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("site_domain must be a string")
        domain = v.strip().lower()
        if "://" in domain:
            domain = domain.split("://", 1)[1]
        domain = domain.split("/", 1)[0].split(":", 1)[0]
        domain = domain.removeprefix("www.")
        return domain or None

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> "AnalyzerConfig":
        """
        Builds a config from a settings section (e.g. the 'analyzer' block of settings.json).
        Falls back to defaults when the section is missing or invalid.
        """
        if not settings:
            return cls()
        try:
            return cls.model_validate(dict(settings))
        except ValidationError as e:
            logger.error("Invalid analyzer settings, using defaults: %s", e)
            return cls()


DEFAULT_CONFIG = AnalyzerConfig()
