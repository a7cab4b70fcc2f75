# src/seo_analyzer/metrics/syllables.py
"""
Heuristic English syllable counter.

Counts groups of consecutive vowels (y included), drops a silent trailing 'e' and never
returns less than one for a non-empty word. It is an approximation, not phonetics:
"create" and "business" are off by one, which is acceptable for readability formulas.
"""
import re

COMPLEX_WORD_SYLLABLES = 3

_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")
_NON_LETTER_RE = re.compile(r"[^a-z]")


def count_syllables(word: str) -> int:
    """Returns the estimated number of syllables in a word (0 only for an empty word)."""
    if not word:
        return 0

    letters = _NON_LETTER_RE.sub("", word.lower())
    if not letters:
        # Numbers and symbols still take time to read
        return 1

    count = len(_VOWEL_GROUP_RE.findall(letters))

    # Silent trailing 'e' ("make", "state"), but keep consonant + 'le' ("table", "simple")
    if letters.endswith("e") and not letters.endswith(("le", "ee", "ye")) and count > 1:
        count -= 1
    elif letters.endswith("le") and len(letters) > 2 and letters[-3] in "aeiouy" and count > 1:
        # vowel + 'le' is silent too ("whale", "mile")
        count -= 1

    return max(1, count)


def is_complex_word(word: str) -> bool:
    return count_syllables(word) >= COMPLEX_WORD_SYLLABLES
