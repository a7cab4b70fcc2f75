# src/seo_analyzer/normalizer/tokenizer.py
"""
Plain-text tokenisers for words, sentences and paragraphs.

Simple heuristics on purpose: sentences end at '.', '!' or '?' followed by whitespace
or the end of the block. Abbreviations ("e.g. this") and decimals followed by a space
therefore split a sentence. All patterns are single-pass without nested quantifiers.
"""
import re
from typing import List

_WS_RE = re.compile(r"\s+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t\r\f\v]*\n")
_SENTENCE_END_RE = re.compile(r"(?<![.!?])[.!?]+[\"'”’)\]]*(?=\s|$)")
# Everything that is not a letter, digit, underscore, apostrophe, hyphen or whitespace
_NON_WORD_RE = re.compile(r"[^\w\s'\-]")
_EDGE_PUNCT = "'-_"


def normalize_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def split_words(text: str) -> List[str]:
    """
    Lower-cases the text, strips punctuation and splits on whitespace.
    A word is any non-empty token left over; leading/trailing apostrophes and hyphens are trimmed.
    """
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub("", text.lower())
    words = []
    for token in cleaned.split():
        token = token.strip(_EDGE_PUNCT)
        if token:
            words.append(token)
    return words


def split_sentences(text: str) -> List[str]:
    """Splits one block of text into sentences; unterminated trailing text is a sentence too."""
    text = normalize_whitespace(text)
    if not text:
        return []

    sentences = []
    start = 0
    for match in _SENTENCE_END_RE.finditer(text):
        sentence = text[start:match.end()].strip()
        if split_words(sentence):
            sentences.append(sentence)
        start = match.end()

    tail = text[start:].strip()
    if split_words(tail):
        sentences.append(tail)
    return sentences


def split_blocks(text: str) -> List[str]:
    """Splits text on blank lines and returns the whitespace-normalized, non-empty blocks."""
    if not text:
        return []
    blocks = (normalize_whitespace(b) for b in _PARAGRAPH_SPLIT_RE.split(text))
    return [b for b in blocks if b]
