# src/seo_analyzer/metrics/statistics.py
import logging
from typing import List, Optional, Sequence

from ..model import ContentStatistics, LinkCount, empty_heading_count
from ..normalizer.models import NormalizedContent
from ..normalizer.tokenizer import split_words
from .keywords import contains_keyword, count_keyword_occurrences, keyword_coverage, keyword_density, keyword_tokens
from .passive_voice import is_passive
from .readability import flesch_reading_ease, percentage, reading_time_minutes
from .syllables import count_syllables, is_complex_word
from .transition_words import has_transition_word

logger = logging.getLogger(__name__)


class StatisticsExtractor:
    """
    Computes ContentStatistics from normalized content.

    Every ratio is derived on its own from the normalized units with its own
    zero-denominator guard; no accumulator is shared between metrics.
    """

    def extract(
            self,
            content: NormalizedContent,
            keyword: Optional[str] = None,
            related_keywords: Sequence[str] = ()
    ) -> ContentStatistics:
        """
        Builds the statistics for one piece of content.

        Args:
            content (NormalizedContent): Output of the ContentNormalizer.
            keyword (Optional[str]): Focus keyword. Keyword fields stay None when it is blank.
            related_keywords (Sequence[str]): Secondary keyphrases to look for in the text.

        Returns:
            ContentStatistics: Counts, ratios, keyword signals and structure counts.
        """
        words = content.words
        word_count = len(words)
        sentence_count = len(content.sentences)
        paragraph_count = len(content.paragraphs)

        syllable_count = sum(count_syllables(w) for w in words)
        complex_word_count = sum(1 for w in words if is_complex_word(w))

        sentence_lengths = [len(split_words(s)) for s in content.sentences]
        paragraph_lengths = [len(split_words(p)) for p in content.paragraphs]

        passive_count = sum(1 for s in content.sentences if is_passive(s))
        transition_count = sum(1 for s in content.sentences if has_transition_word(s))

        stats = ContentStatistics(
            word_count=word_count,
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            syllable_count=syllable_count,
            complex_word_count=complex_word_count,
            average_sentence_length=self._average(sentence_lengths),
            average_paragraph_length=self._average(paragraph_lengths),
            passive_voice_percentage=percentage(passive_count, sentence_count),
            transition_word_percentage=percentage(transition_count, sentence_count),
            complex_word_percentage=percentage(complex_word_count, word_count),
            sentence_lengths=sentence_lengths,
            paragraph_lengths=paragraph_lengths,
            flesch_reading_ease=flesch_reading_ease(word_count, sentence_count, syllable_count),
            reading_time_minutes=reading_time_minutes(word_count),
            **self._structure(content),
        )

        if keyword_tokens(keyword):
            self._apply_keyword(stats, content, keyword)

        related = [k.strip() for k in related_keywords if keyword_tokens(k)]
        if related:
            stats.related_keywords_found = keyword_coverage(content.words, related)

        logger.debug(
            f"Extracted statistics: {word_count} words, {sentence_count} sentences, "
            f"{paragraph_count} paragraphs"
        )
        return stats

    # --- Structure ---

    @staticmethod
    def _structure(content: NormalizedContent) -> dict:
        heading_count = empty_heading_count()
        for heading in content.headings:
            heading_count[f"h{heading.level}"] += 1

        return {
            "heading_count": heading_count,
            "heading_levels": [h.level for h in content.headings],
            "link_count": LinkCount(
                internal=sum(1 for link in content.links if link.locality == "internal"),
                external=sum(1 for link in content.links if link.locality == "external"),
            ),
            "image_count": len(content.images),
            "images_missing_alt": sum(1 for img in content.images if not img.has_alt),
        }

    # --- Focus keyword ---

    @staticmethod
    def _apply_keyword(stats: ContentStatistics, content: NormalizedContent, keyword: str) -> None:
        occurrences = count_keyword_occurrences(content.words, keyword)
        introduction = content.paragraphs[0] if content.paragraphs else ""

        stats.keyword_count = occurrences
        stats.keyword_density = keyword_density(content.words, keyword)
        stats.keyword_in_introduction = contains_keyword(introduction, keyword)
        stats.keyword_in_h1 = any(
            contains_keyword(h.text, keyword) for h in content.headings if h.level == 1
        )
        stats.keyword_subheading_count = sum(
            1 for h in content.headings if h.level > 1 and contains_keyword(h.text, keyword)
        )

    @staticmethod
    def _average(lengths: List[int]) -> float:
        if not lengths:
            return 0.0
        return sum(lengths) / len(lengths)
