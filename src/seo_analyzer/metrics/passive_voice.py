# src/seo_analyzer/metrics/passive_voice.py
"""
Passive voice detection.

A sentence counts as passive when a form of "to be" (or "get") is followed, optionally
after one '-ly' adverb, by a past participle: a word ending in '-ed' or one of the
common irregular participles below. Adjectives after "to be" ("was happy") are not
flagged, but the bare '-ed' match has known false positives: adjectives that end in
'-ed' ("was tired", "was bored") and short words such as "is red".
"""
import re

IRREGULAR_PARTICIPLES = frozenset({
    "awoken", "been", "beaten", "become", "begun", "bent", "bitten", "blown", "born", "borne",
    "bought", "bound", "broken", "brought", "built", "burnt", "caught", "chosen", "cut", "dealt",
    "done", "drawn", "driven", "drunk", "dug", "eaten", "fallen", "fed", "felt", "fought",
    "found", "flown", "forbidden", "forgiven", "forgotten", "frozen", "given", "gone", "grown",
    "heard", "held", "hidden", "hit", "hung", "hurt", "kept", "known", "laid", "led", "left",
    "lent", "lit", "lost", "made", "meant", "met", "paid", "put", "read", "ridden", "risen",
    "run", "said", "seen", "sent", "set", "shaken", "shown", "shot", "shut", "sold", "sought",
    "spent", "split", "spoken", "spread", "stolen", "struck", "stuck", "sung", "sunk", "sworn",
    "taken", "taught", "thought", "thrown", "told", "torn", "understood", "undertaken",
    "upset", "withdrawn", "woken", "won", "worn", "written", "wound",
})

_AUXILIARIES = r"am|is|are|was|were|be|been|being|get|gets|got|gotten|getting"
_PARTICIPLE = r"[a-z]+ed|" + "|".join(sorted(IRREGULAR_PARTICIPLES, key=len, reverse=True))

_PASSIVE_RE = re.compile(
    rf"\b(?:{_AUXILIARIES})\s+(?:[a-z]+ly\s+)?(?:{_PARTICIPLE})\b",
    re.IGNORECASE,
)


def is_passive(sentence: str) -> bool:
    """True if the sentence contains a 'to be' + past participle construction."""
    if not sentence:
        return False
    return _PASSIVE_RE.search(sentence) is not None