# src/seo_analyzer/normalizer/models.py
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

LinkLocality = Literal["internal", "external", "ignored"]


class HeadingRef(BaseModel):
    """A heading (h1-h6) in document order."""
    level: int
    text: str = ""


class LinkRef(BaseModel):
    """
    An anchor found in the content.
    'ignored' covers fragments and non-navigational schemes (mailto:, tel:, ...).
    """
    href: str
    text: str = ""
    locality: LinkLocality = "ignored"


class ImageRef(BaseModel):
    src: str = ""
    alt: Optional[str] = None

    @property
    def has_alt(self) -> bool:
        return bool(self.alt and self.alt.strip())


class NormalizedContent(BaseModel):
    """
    The content broken into the units the metrics stage works on.

    'blocks' holds every text block (headings included); 'paragraphs' only the
    non-heading blocks. Sentences are cut from all blocks.
    """
    text: str = ""
    blocks: List[str] = Field(default_factory=list)
    paragraphs: List[str] = Field(default_factory=list)
    sentences: List[str] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    headings: List[HeadingRef] = Field(default_factory=list)
    links: List[LinkRef] = Field(default_factory=list)
    images: List[ImageRef] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.words
