# src/seo_analyzer/metrics/readability.py
import math
from typing import Optional

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

WORDS_PER_MINUTE = 225


def flesch_reading_ease(word_count: int, sentence_count: int, syllable_count: int) -> Optional[float]:
    """
    Flesch Reading Ease: 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words).

    Args:
        word_count (int): Total words.
        sentence_count (int): Total sentences.
        syllable_count (int): Total syllables over all words.

    Returns:
        Optional[float]: The score clamped to [0, 100] and rounded to one decimal,
        or None when there are no words or no sentences.
    """
    if word_count <= 0 or sentence_count <= 0:
        return None

    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * (word_count / sentence_count)
        - FLESCH_SYLLABLE_WEIGHT * (syllable_count / word_count)
    )
    return round(min(100.0, max(0.0, score)), 1)


def reading_time_minutes(word_count: int) -> int:
    """Minutes needed at an average adult reading pace, rounded up."""
    if word_count <= 0:
        return 0
    return math.ceil(word_count / WORDS_PER_MINUTE)


def percentage(part: int, total: int) -> float:
    """part / total as a percentage in [0, 100]; 0.0 when total is 0."""
    if total <= 0:
        return 0.0
    return min(100.0, max(0.0, part / total * 100))
