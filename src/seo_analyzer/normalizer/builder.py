# src/seo_analyzer/normalizer/builder.py
import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup

from .models import HeadingRef, ImageRef, LinkLocality, LinkRef, NormalizedContent
from .tokenizer import split_blocks, split_sentences, split_words

logger = logging.getLogger(__name__)

STRIP_TAGS = ["script", "style", "noscript", "template"]
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure",
    "footer", "form", "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "table",
    "td", "th", "tr", "ul",
]
HEADING_TAG_RE = re.compile(r"^h[1-6]$")
IGNORED_HREF_PREFIXES = ("#", "mailto:", "tel:", "sms:", "javascript:", "data:")

BLOCK_BREAK = "\n\n"
# Private-use code point marking a heading block: <MARK><level><MARK><text>
_HEADING_MARK = "\ue000"
_HEADING_BLOCK_RE = re.compile(rf"^{_HEADING_MARK}([1-6]){_HEADING_MARK}(.*)$")

_MD_HEADING_RE = re.compile(r"^[ \t]{0,3}(#{1,6})[ \t]+([^\n]+)$", re.MULTILINE)
_MD_IMAGE_RE = re.compile(r"!\[([^\[\]\n]*)\]\(([^()\s]*)(?:[ \t]+\"[^\"\n]*\")?\)")
_MD_LINK_RE = re.compile(r"\[([^\[\]\n]+)\]\(([^()\s]+)(?:[ \t]+\"[^\"\n]*\")?\)")
_FALLBACK_TAG_RE = re.compile(r"<[^<>]*>")


def classify_href(href: Optional[str], site_domain: Optional[str] = None) -> LinkLocality:
    """
    Decides whether a link is internal, external or not counted at all.

    - fragments and mailto:/tel:/javascript:/data: links are ignored
    - no hostname (relative path) -> internal
    - hostname equal to the site domain or one of its subdomains -> internal
    - any other hostname -> external (always, when no site domain is configured)
    """
    href = (href or "").strip()
    if not href or href.lower().startswith(IGNORED_HREF_PREFIXES):
        return "ignored"

    try:
        parsed = urlparse(href)
        host = (parsed.hostname or "").removeprefix("www.")
    except ValueError:
        # e.g. an unterminated IPv6 literal
        return "ignored"

    if not host:
        if parsed.scheme and parsed.scheme not in ("http", "https"):
            return "ignored"
        return "internal"

    if site_domain and (host == site_domain or host.endswith(f".{site_domain}")):
        return "internal"
    return "external"


class ContentNormalizer:
    """
    Turns raw HTML, Markdown or plain text into a NormalizedContent.

    Structure (headings, links, images) is read from the markup before it is stripped.
    Uses BeautifulSoup's lenient 'html.parser' backend, so unclosed or stray tags are
    handled on a best-effort basis instead of raising.
    """

    def __init__(self, site_domain: Optional[str] = None):
        self.site_domain = site_domain

    def normalize(self, content: str) -> NormalizedContent:
        """
        Parses content into blocks, paragraphs, sentences, words and structural references.

        Args:
            content (str): HTML, Markdown or plain text. Empty input gives an empty result.

        Returns:
            NormalizedContent: The linguistic units plus headings, links and images.
        """
        if not content or not content.strip():
            return NormalizedContent()

        # Lone surrogates ("\udcff") are valid str but not encodable; the parser encodes
        clean = content.encode("utf-8", "replace").decode("utf-8")
        clean = clean.replace("\ufeff", "").replace(_HEADING_MARK, "")
        raw_text, links, images = self._strip_markup(clean)
        raw_text, md_links, md_images = self._strip_markdown(raw_text)
        links.extend(md_links)
        images.extend(md_images)

        blocks: List[str] = []
        paragraphs: List[str] = []
        headings: List[HeadingRef] = []

        for block in split_blocks(raw_text):
            match = _HEADING_BLOCK_RE.match(block)
            if match:
                text = match.group(2).strip()
                headings.append(HeadingRef(level=int(match.group(1)), text=text))
                if text:
                    blocks.append(text)
                continue
            # Punctuation-only leftovers ("***", "|") are not paragraphs
            if not split_words(block):
                continue
            blocks.append(block)
            paragraphs.append(block)

        sentences = [s for block in blocks for s in split_sentences(block)]
        text = " ".join(blocks)

        return NormalizedContent(
            text=text,
            blocks=blocks,
            paragraphs=paragraphs,
            sentences=sentences,
            words=split_words(text),
            headings=headings,
            links=links,
            images=images,
        )

    # --- HTML ---

    def _strip_markup(self, html: str) -> Tuple[str, List[LinkRef], List[ImageRef]]:
        """Extracts links and images, marks headings and block boundaries, then returns the text."""
        try:
            soup = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            logger.warning("HTML parser rejected markup, stripping tags with a regex: %s", e)
            return _FALLBACK_TAG_RE.sub(" ", html), [], []

        for tag in soup(STRIP_TAGS):
            tag.decompose()

        links = [
            self._link_ref(a.get("href"), a.get_text(" ", strip=True))
            for a in soup.find_all("a", href=True)
        ]
        images = [
            ImageRef(src=img.get("src") or "", alt=img.get("alt"))
            for img in soup.find_all("img")
        ]

        for tag in soup.find_all(HEADING_TAG_RE):
            # Headings nested in headings are part of the outer heading's text
            if tag.find_parent(HEADING_TAG_RE):
                continue
            level = int(tag.name[1])
            text = tag.get_text(" ", strip=True)
            tag.replace_with(NavigableString(self._heading_block(level, text)))

        for br in soup.find_all("br"):
            br.replace_with(NavigableString("\n"))

        for tag in soup.find_all(BLOCK_TAGS):
            tag.insert_before(NavigableString(BLOCK_BREAK))
            tag.insert_after(NavigableString(BLOCK_BREAK))

        return soup.get_text(), links, images

    # --- Markdown ---

    def _strip_markdown(self, text: str) -> Tuple[str, List[LinkRef], List[ImageRef]]:
        """Recognises Markdown headings, images and links and replaces them with their visible text."""
        links: List[LinkRef] = []
        images: List[ImageRef] = []

        def heading_repl(m: re.Match) -> str:
            return self._heading_block(len(m.group(1)), m.group(2).strip().rstrip("#").strip())

        def image_repl(m: re.Match) -> str:
            images.append(ImageRef(src=m.group(2), alt=m.group(1)))
            return m.group(1)

        def link_repl(m: re.Match) -> str:
            links.append(self._link_ref(m.group(2), m.group(1)))
            return m.group(1)

        text = _MD_HEADING_RE.sub(heading_repl, text)
        text = _MD_IMAGE_RE.sub(image_repl, text)
        text = _MD_LINK_RE.sub(link_repl, text)
        return text, links, images

    # --- Helpers ---

    def _link_ref(self, href: Optional[str], text: str) -> LinkRef:
        href = href if isinstance(href, str) else ""
        return LinkRef(href=href, text=text[:50], locality=classify_href(href, self.site_domain))

    @staticmethod
    def _heading_block(level: int, text: str) -> str:
        return f"{BLOCK_BREAK}{_HEADING_MARK}{level}{_HEADING_MARK}{text}{BLOCK_BREAK}"
