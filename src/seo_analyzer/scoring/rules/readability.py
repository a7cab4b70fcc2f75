# src/seo_analyzer/scoring/rules/readability.py
from typing import Tuple

from ...config import AnalyzerConfig
from ...metrics.readability import percentage
from ...model import AnalysisInput, ContentStatistics
from ..core import AssessResult, RuleDefinition

NO_SENTENCES = "No sentences found. Add content to analyze its readability."


def assess_sentence_length(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """
    Rule: At most max_long_percentage of the sentences may be longer than max_words words.
    """
    if stats.sentence_count == 0:
        return "bad", NO_SENTENCES

    thresholds = config.readability.sentence
    long_count = sum(1 for length in stats.sentence_lengths if length > thresholds.max_words)
    share = percentage(long_count, stats.sentence_count)
    detail = (
        f"{share:.1f}% of the sentences contain more than {thresholds.max_words} words "
        f"(average {stats.average_sentence_length:.1f} words)"
    )

    if share <= thresholds.max_long_percentage:
        return "good", f"Sentence length is good: {detail}."
    if share <= thresholds.ok_long_percentage:
        return "ok", f"{detail}, slightly above the recommended maximum of {thresholds.max_long_percentage:.0f}%."
    return "bad", f"{detail}, more than the recommended maximum of {thresholds.max_long_percentage:.0f}%. Try to shorten your sentences."


def assess_paragraph_length(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.paragraph_count == 0:
        return "bad", "No paragraphs found. Break your content into paragraphs."

    thresholds = config.readability.paragraph
    long_count = sum(1 for length in stats.paragraph_lengths if length > thresholds.max_words)

    if long_count == 0:
        return "good", f"None of the paragraphs are longer than the recommended maximum of {thresholds.max_words} words."
    if long_count == 1 or percentage(long_count, stats.paragraph_count) <= thresholds.ok_long_percentage:
        return "ok", (
            f"{long_count} paragraph{'s' if long_count != 1 else ''} contain{'' if long_count != 1 else 's'} "
            f"more than {thresholds.max_words} words. Consider splitting long paragraphs."
        )
    return "bad", (
        f"{long_count} of {stats.paragraph_count} paragraphs contain more than {thresholds.max_words} words. "
        f"Shorten your paragraphs."
    )


def assess_passive_voice(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.sentence_count == 0:
        return "bad", NO_SENTENCES

    thresholds = config.readability
    share = stats.passive_voice_percentage
    if share <= thresholds.passive_voice_max_percentage:
        return "good", f"{share:.1f}% of the sentences contain passive voice, within the recommended maximum of {thresholds.passive_voice_max_percentage:.0f}%."
    if share <= thresholds.passive_voice_ok_percentage:
        return "ok", f"{share:.1f}% of the sentences contain passive voice, slightly above the recommended maximum of {thresholds.passive_voice_max_percentage:.0f}%."
    return "bad", f"{share:.1f}% of the sentences contain passive voice, well above the recommended maximum of {thresholds.passive_voice_max_percentage:.0f}%. Use more active voice."


def assess_transition_words(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.sentence_count == 0:
        return "bad", NO_SENTENCES

    thresholds = config.readability
    share = stats.transition_word_percentage
    if share >= thresholds.transition_words_min_percentage:
        return "good", f"{share:.1f}% of the sentences contain transition words. Your text flows well."
    if share >= thresholds.transition_words_ok_percentage:
        return "ok", f"{share:.1f}% of the sentences contain transition words, slightly below the recommended {thresholds.transition_words_min_percentage:.0f}%."
    return "bad", f"Only {share:.1f}% of the sentences contain transition words. Use more of them to connect your ideas."


def assess_flesch_reading_ease(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    """Rule: The Flesch Reading Ease score should be 'fairly easy' (70+) or at least 'fairly difficult' (50+)."""
    score = stats.flesch_reading_ease
    if score is None:
        return "bad", "The Flesch Reading Ease score cannot be calculated without words and sentences."

    thresholds = config.readability
    if score >= thresholds.flesch_good_score:
        return "good", f"The copy scores {score:.1f} in the Flesch Reading Ease test, which is considered easy to read."
    if score >= thresholds.flesch_ok_score:
        return "ok", f"The copy scores {score:.1f} in the Flesch Reading Ease test, which is considered fairly difficult to read."
    return "bad", f"The copy scores {score:.1f} in the Flesch Reading Ease test, which is considered difficult to read. Use shorter sentences and simpler words."


def assess_word_complexity(data: AnalysisInput, stats: ContentStatistics, config: AnalyzerConfig) -> AssessResult:
    if stats.word_count == 0:
        return "bad", "No words found. Add content to analyze word complexity."

    thresholds = config.readability
    share = stats.complex_word_percentage
    if share <= thresholds.complex_words_max_percentage:
        return "good", f"{share:.1f}% of the words are complex. Your vocabulary is easy to follow."
    if share <= thresholds.complex_words_ok_percentage:
        return "ok", f"{share:.1f}% of the words are complex, slightly above the recommended {thresholds.complex_words_max_percentage:.0f}%."
    return "bad", f"{share:.1f}% of the words are complex. Replace long words with simpler ones where you can."


# --- RULE TABLE ---

READABILITY_RULES: Tuple[RuleDefinition, ...] = (
    RuleDefinition("sentence-length", "readability", 0.8, assess_sentence_length),
    RuleDefinition("paragraph-length", "readability", 0.7, assess_paragraph_length),
    RuleDefinition("passive-voice", "readability", 0.7, assess_passive_voice),
    RuleDefinition("transition-words", "readability", 0.8, assess_transition_words),
    RuleDefinition("flesch-reading-ease", "readability", 1.0, assess_flesch_reading_ease),
    RuleDefinition("word-complexity", "readability", 0.6, assess_word_complexity),
)
