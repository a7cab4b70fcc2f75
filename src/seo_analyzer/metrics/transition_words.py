# src/seo_analyzer/metrics/transition_words.py
"""
Transition word detection against a fixed English vocabulary.

Matching is case-insensitive and on whole words: the sentence is tokenised once and
single words are looked up in a set, multi-word phrases are matched on the joined
token stream. Time is linear in the sentence length.
"""
from typing import FrozenSet, Optional, Tuple

from ..normalizer.tokenizer import split_words

TRANSITION_WORDS: Tuple[str, ...] = (
    # Addition
    "also", "moreover", "furthermore", "additionally", "besides", "plus", "likewise",
    "similarly", "equally", "identically", "uniquely", "alternatively", "in addition",
    # Contrast
    "however", "although", "but", "yet", "still", "nevertheless", "nonetheless",
    "conversely", "instead", "otherwise", "rather", "whereas", "despite",
    "regardless", "notwithstanding", "on the other hand", "in contrast",
    # Cause and effect
    "therefore", "thus", "hence", "consequently", "accordingly", "because",
    "since", "due to", "as a result", "for this reason", "so",
    # Time
    "meanwhile", "subsequently", "afterwards", "then", "next", "finally",
    "eventually", "later", "previously", "simultaneously", "during",
    # Example
    "for example", "for instance", "specifically", "namely", "particularly",
    "especially", "notably", "including", "such as",
    # Emphasis
    "indeed", "certainly", "undoubtedly", "obviously", "clearly", "naturally",
    "of course", "importantly", "significantly",
    # Sequence
    "first", "second", "third", "firstly", "secondly", "thirdly", "lastly",
    "initially", "primarily", "predominantly",
    # Conclusion
    "in conclusion", "to conclude", "in summary", "to summarize", "overall",
    "altogether", "in short", "briefly", "to sum up", "ultimately",
)

_SINGLE_WORDS: FrozenSet[str] = frozenset(w for w in TRANSITION_WORDS if " " not in w)
_PHRASES: Tuple[str, ...] = tuple(w for w in TRANSITION_WORDS if " " in w)


def find_transition_word(sentence: str) -> Optional[str]:
    """Returns the first transition word or phrase found in the sentence, or None."""
    words = split_words(sentence)
    if not words:
        return None

    for word in words:
        if word in _SINGLE_WORDS:
            return word

    joined = f" {' '.join(words)} "
    for phrase in _PHRASES:
        if f" {phrase} " in joined:
            return phrase
    return None


def has_transition_word(sentence: str) -> bool:
    return find_transition_word(sentence) is not None
