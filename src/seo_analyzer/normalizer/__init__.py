from .builder import ContentNormalizer, classify_href
from .models import HeadingRef, ImageRef, LinkRef, NormalizedContent

__all__ = ["ContentNormalizer", "HeadingRef", "ImageRef", "LinkRef", "NormalizedContent", "classify_href"]
