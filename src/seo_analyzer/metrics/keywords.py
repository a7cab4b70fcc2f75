# src/seo_analyzer/metrics/keywords.py
from typing import Iterable, List, Optional, Sequence

from ..normalizer.tokenizer import split_words


def keyword_tokens(keyword: Optional[str]) -> List[str]:
    """Tokenises a keyword phrase the same way content is tokenised."""
    if not keyword:
        return []
    return split_words(keyword)


def count_keyword_occurrences(words: Sequence[str], keyword: Optional[str]) -> int:
    """
    Counts whole-word, case-insensitive occurrences of the keyword phrase in a token list.
    Overlapping matches of a repeated phrase ("very very") are counted once per start position.
    """
    tokens = keyword_tokens(keyword)
    if not tokens or len(tokens) > len(words):
        return 0

    n = len(tokens)
    first = tokens[0]
    return sum(
        1 for i in range(len(words) - n + 1)
        if words[i] == first and list(words[i:i + n]) == tokens
    )


def keyword_density(words: Sequence[str], keyword: Optional[str]) -> Optional[float]:
    """
    Occurrences divided by the word count, as a percentage.
    None without a keyword; 0.0 for empty content.
    """
    if not keyword_tokens(keyword):
        return None
    if not words:
        return 0.0
    return count_keyword_occurrences(words, keyword) / len(words) * 100


def contains_keyword(text: Optional[str], keyword: Optional[str]) -> bool:
    """True if the text contains the keyword phrase as whole words."""
    if not text:
        return False
    return count_keyword_occurrences(split_words(text), keyword) > 0


def starts_with_keyword(text: Optional[str], keyword: Optional[str]) -> bool:
    tokens = keyword_tokens(keyword)
    if not text or not tokens:
        return False
    return split_words(text)[:len(tokens)] == tokens


def keyword_coverage(text_words: Sequence[str], phrases: Iterable[str]) -> List[str]:
    """Returns the phrases (original spelling) that occur at least once in the words."""
    return [p for p in phrases if count_keyword_occurrences(text_words, p) > 0]
