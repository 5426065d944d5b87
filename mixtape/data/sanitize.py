import html
import re

from bs4 import BeautifulSoup

from mixtape.config import DESCRIPTION_MAX_LENGTH

_WHITESPACE_RE = re.compile(r"\s+")


def _unescape_fully(text: str) -> str:
    # Provider descriptions are sometimes escaped twice (&amp;lt;b&amp;gt;).
    previous = None
    while previous != text:
        previous, text = text, html.unescape(text)
    return text


def strip_markup(text: str | None) -> str:
    """
    Remove HTML markup from provider text.

    Entities are decoded first so escaped tags cannot survive as markup, then
    the text nodes are joined with spaces and whitespace is collapsed. A bare
    "<" that does not open a tag ("<3", "BPM < 90") stays as text.
    """
    if not text:
        return ""
    cleaned = _unescape_fully(text)
    cleaned = BeautifulSoup(cleaned, "html.parser").get_text(" ")
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def sanitize_description(
    text: str | None,
    limit: int = DESCRIPTION_MAX_LENGTH,
) -> str:
    """
    Markup-free description bounded to `limit` characters.

    This is the only validation a description gets: links do not re-check it
    when they are decoded.
    """
    cleaned = strip_markup(text)
    if limit < 0:
        limit = 0
    if len(cleaned) > limit:
        cleaned = cleaned[:limit].rstrip()
    return cleaned
