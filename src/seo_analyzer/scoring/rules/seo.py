# src/seo_analyzer/scoring/rules/seo.py
"""
SEO assessments.

Each assess function reads the input and its statistics and returns (rating, message),
or None when the rule does not apply. Keyword rules are only called with a focus keyword.
"""
from typing import List, Tuple

from ...config import AnalyzerConfig
from ...metrics.keywords import contains_keyword, keyword_tokens, starts_with_keyword
from ...model import AnalysisInput, ContentStatistics
from ..core import AssessResult, RuleDefinition


# --- Focus keyword ---

def assess_keyword_density(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """
    Rule: The focus keyword should make up min_density-max_density percent of the words.
    Slightly under or over the band is 'ok'; absent or stuffed is 'bad'.
    """
    thresholds = config.seo.keyword
    density = stats.keyword_density or 0.0
    band = f"{thresholds.min_density}%-{thresholds.max_density}%"

    if density <= 0:
        return "bad", "The focus keyword does not appear in the text. Use it a few times in your content."
    if thresholds.min_density <= density <= thresholds.max_density:
        return "good", f"The focus keyword density is {density:.1f}%, within the recommended range of {band}."
    if density < thresholds.min_density:
        return "ok", (
            f"The focus keyword density is {density:.1f}%, below the recommended range of {band}. "
            f"Use your focus keyword more often."
        )
    if density <= thresholds.stuffing_density:
        return "ok", (
            f"The focus keyword density is {density:.1f}%, above the recommended range of {band}. "
            f"Reduce keyword usage to avoid over-optimization."
        )
    return "bad", (
        f"The focus keyword density is {density:.1f}%, which looks like keyword stuffing. "
        f"Use it far less often."
    )


def assess_keyphrase_in_title(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """Rule: The SEO title should start with the focus keyword."""
    keyword = data.focus_keyword
    if not data.title or not data.title.strip():
        return "bad", "No SEO title has been set. Add a title that contains the focus keyword."
    if starts_with_keyword(data.title, keyword):
        return "good", "The SEO title starts with the focus keyword."
    if contains_keyword(data.title, keyword):
        return "ok", "The SEO title contains the focus keyword, but not at the beginning. Consider moving it to the start."
    return "bad", "The focus keyword does not appear in the SEO title. Add it to improve rankings."


def assess_keyphrase_in_introduction(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.keyword_in_introduction:
        return "good", "The focus keyword appears in the first paragraph."
    return "bad", "The focus keyword does not appear in the first paragraph. Mention it early so readers and search engines see the topic."


def assess_keyphrase_in_meta_description(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if not data.meta_description or not data.meta_description.strip():
        return "bad", "No meta description has been set, so the focus keyword cannot appear in it."
    if contains_keyword(data.meta_description, data.focus_keyword):
        return "good", "The meta description contains the focus keyword."
    return "bad", "The focus keyword does not appear in the meta description. Add it to improve click-through."


# --- Title & meta description ---

def _length_assessment(text: str, label: str, min_length: int, max_length: int) -> AssessResult:
    length = len(text)
    if length < min_length:
        return "ok", f"The {label} is {length} characters, below the recommended minimum of {min_length}."
    if length > max_length:
        return "ok", f"The {label} is {length} characters, above the recommended maximum of {max_length}."
    return "good", f"The {label} length ({length} characters) is within the recommended {min_length}-{max_length} characters."


def assess_title_length(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    title = (data.title or "").strip()
    if not title:
        return "bad", "No SEO title has been set. This is critical for search engine rankings."
    limits = config.seo.title
    return _length_assessment(title, "SEO title", limits.min_length, limits.max_length)


def assess_meta_description_length(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    meta = (data.meta_description or "").strip()
    if not meta:
        return "bad", "No meta description has been set. Search engines will show a random snippet instead."
    limits = config.seo.meta_description
    return _length_assessment(meta, "meta description", limits.min_length, limits.max_length)


# --- Content ---

def assess_text_length(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """Rule: Content must reach the minimum word count for its article type (more for cornerstone content)."""
    thresholds = config.seo.content
    min_words = thresholds.cornerstone_min_words if data.is_cornerstone else thresholds.min_words
    suffix = " for cornerstone content" if data.is_cornerstone else ""
    words = stats.word_count

    if words == 0:
        return "bad", "No content found. Add content to your page."
    if words >= min_words:
        return "good", f"The text contains {words} words, above the recommended minimum of {min_words} words{suffix}."
    if words >= min_words * thresholds.ok_ratio:
        return "ok", f"The text contains {words} words. Add a little more to reach the recommended minimum of {min_words} words{suffix}."
    return "bad", f"The text contains only {words} words, far below the recommended minimum of {min_words} words{suffix}. Add more content."


def _has_proper_hierarchy(levels: List[int]) -> bool:
    """False if a heading skips a level going down (an H3 directly after an H1)."""
    previous = 0
    for level in levels:
        if previous and level > previous + 1:
            return False
        previous = level
    return True


def _heading_points(data: AnalysisInput, stats: ContentStatistics) -> Tuple[int, List[str]]:
    """
    Scores the heading outline: one H1 (+3, +2 with the keyword), two or more H2s
    (+2, +1 with the keyword in a subheading; a single H2 gives +1) and no skipped
    levels (+1). Without a focus keyword the keyword points are granted.
    """
    has_keyword = stats.keyword_count is not None
    h1 = stats.heading_count["h1"]
    h2 = stats.heading_count["h2"]
    points = 0
    issues: List[str] = []

    if h1 == 0:
        issues.append("No H1 heading found")
    elif h1 > 1:
        issues.append(f"Multiple H1 headings found ({h1}). Use only one H1 per page")
    else:
        points += 3
        if not has_keyword or stats.keyword_in_h1:
            points += 2
        else:
            issues.append("Focus keyword not found in H1")

    if h2 == 0:
        issues.append("No H2 headings found. Add subheadings to structure your content")
    elif h2 == 1:
        issues.append("Only one H2 found. Add more subheadings for better structure")
        points += 1
    else:
        points += 2
        if not has_keyword or stats.keyword_subheading_count:
            points += 1

    if _has_proper_hierarchy(stats.heading_levels):
        points += 1
    else:
        issues.append("Heading hierarchy skips a level (e.g. an H3 directly after an H1)")

    return points, issues


def assess_heading_structure(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    points, issues = _heading_points(data, stats)
    if points >= 8:
        return "good", "Excellent heading structure: one H1, several subheadings and a clean hierarchy."
    if points >= 5:
        detail = f": {'. '.join(issues)}." if issues else "."
        return "ok", f"Good heading structure with minor issues{detail}"
    return "bad", f"Poor heading structure. Issues found: {'. '.join(issues)}."


# --- Links & images ---

def assess_internal_links(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    count = stats.link_count.internal
    if count == 0:
        return "bad", "No internal links found. Link to related pages on your own site."
    return "good", f"The text contains {count} internal link{'s' if count != 1 else ''}."


def assess_external_links(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    count = stats.link_count.external
    if count == 0:
        return "bad", "No outbound links found. Link to authoritative sources to support your content."
    return "good", f"The text contains {count} outbound link{'s' if count != 1 else ''}."


def assess_images(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.image_count == 0:
        return "bad", "No images found. Add images to make your content more engaging and to break up the text."
    if stats.images_with_alt == 0:
        return "ok", "Images were found, but none has alt text. Describe your images with alt attributes."
    return "good", (
        f"The text contains {stats.image_count} image{'s' if stats.image_count != 1 else ''}, "
        f"{stats.images_with_alt} with alt text."
    )


def assess_related_keywords(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """Rule: Most requested related keyphrases should appear in the text (topical depth)."""
    if stats.related_keywords_found is None:
        return None

    requested = [k.strip() for k in data.related_keywords if keyword_tokens(k)]
    found = set(stats.related_keywords_found)
    missing = [k for k in requested if k not in found]
    coverage = len(stats.related_keywords_found) / len(requested) * 100 if requested else 0.0

    if coverage >= config.seo.related_keywords_good_coverage:
        return "good", f"Great topical coverage: {coverage:.0f}% of the related keywords are used."
    suggestion = f" Consider adding: {', '.join(missing[:5])}." if missing else ""
    if coverage >= config.seo.related_keywords_ok_coverage:
        return "ok", f"Good topical coverage: {coverage:.0f}% of the related keywords are used.{suggestion}"
    return "bad", f"Limited topical coverage: only {coverage:.0f}% of the related keywords are used.{suggestion}"


# --- RULE TABLE ---

SEO_RULES: Tuple[RuleDefinition, ...] = (
    RuleDefinition("keyword-density", "seo", 1.4, assess_keyword_density, requires_keyword=True),
    RuleDefinition("keyphrase-in-title", "seo", 1.5, assess_keyphrase_in_title, requires_keyword=True),
    RuleDefinition("keyphrase-in-introduction", "seo", 1.2, assess_keyphrase_in_introduction, requires_keyword=True),
    RuleDefinition("keyphrase-in-meta-description", "seo", 1.0, assess_keyphrase_in_meta_description, requires_keyword=True),
    RuleDefinition("seo-title-length", "seo", 1.0, assess_title_length),
    RuleDefinition("meta-description-length", "seo", 1.3, assess_meta_description_length),
    RuleDefinition("text-length", "seo", 1.3, assess_text_length),
    RuleDefinition("heading-structure", "seo", 1.4, assess_heading_structure),
    RuleDefinition("internal-links", "seo", 1.1, assess_internal_links),
    RuleDefinition("external-links", "seo", 1.1, assess_external_links),
    RuleDefinition("images", "seo", 0.9, assess_images),
    RuleDefinition("related-keywords", "seo", 1.2, assess_related_keywords),
)
