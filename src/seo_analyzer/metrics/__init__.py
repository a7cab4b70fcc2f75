from .keywords import count_keyword_occurrences, keyword_density
from .passive_voice import is_passive
from .readability import flesch_reading_ease
from .statistics import StatisticsExtractor
from .syllables import count_syllables
from .transition_words import TRANSITION_WORDS, has_transition_word

__all__ = [
    "StatisticsExtractor",
    "TRANSITION_WORDS",
    "count_keyword_occurrences",
    "count_syllables",
    "flesch_reading_ease",
    "has_transition_word",
    "is_passive",
    "keyword_density",
]
