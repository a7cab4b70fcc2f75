# tests/analyzer/conftest.py
import pytest

FILLER = ["plants", "need", "water", "and", "light", "to", "grow", "well", "soil"]


def build_article(keyword_hits: int, keyword: str = "garden", total_words: int = 300) -> str:
    """
    Bouwt een HTML-artikel van precies total_words woorden, met het keyword
    keyword_hits keer, één interne link, één externe link en één afbeelding met alt-tekst.
    """
    step = total_words // keyword_hits if keyword_hits else 0
    positions = set(range(0, step * keyword_hits, step)) if keyword_hits else set()

    words = [keyword if i in positions else FILLER[i % len(FILLER)] for i in range(total_words)]
    words[12] = f'<a href="/about">{words[12]}</a>'
    words[25] = f'<a href="https://example.org/guide">{words[25]}</a>'

    sentences = [" ".join(words[i:i + 10]) + "." for i in range(0, total_words, 10)]
    paragraphs = [" ".join(sentences[i:i + 5]) for i in range(0, len(sentences), 5)]
    paragraphs[0] += ' <img src="garden.jpg" alt="Garden tools">'
    return "".join(f"<p>{p}</p>" for p in paragraphs)


@pytest.fixture
def make_article():
    """Fixture die de artikelbouwer teruggeeft."""
    return build_article
