"""Metadata extraction: turns an HTML document into a :class:`PageMetadata`."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from linkgrab.scraper.errors import ParseError
from linkgrab.scraper.models import PageMetadata

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _clean(text: str | None) -> str | None:
    """Collapse runs of whitespace; blank strings become ``None``."""
    if text is None:
        return None
    collapsed = " ".join(text.split())
    return collapsed or None


def _extract_title(soup: BeautifulSoup) -> str | None:
    tag = soup.find("title")
    if tag is None:
        return None
    return _clean(tag.get_text())


def _meta_content(soup: BeautifulSoup, attr: str, value: str) -> str | None:
    """Return the first non-blank ``content`` of a ``<meta>`` whose *attr* equals *value* (any case)."""
    for tag in soup.find_all("meta"):
        candidate = tag.get(attr)
        if not (isinstance(candidate, str) and candidate.strip().lower() == value):
            continue
        content = _clean(tag.get("content"))
        if content:
            return content
    return None


def _extract_language(soup: BeautifulSoup) -> str | None:
    """Prefer ``<html lang>``; fall back to a ``content-language`` meta header."""
    html = soup.find("html")
    if html is not None:
        lang = _clean(html.get("lang"))
        if lang:
            return lang
    return _meta_content(soup, "http-equiv", "content-language")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(html: str) -> PageMetadata:
    """Read title, description and language from *html*.

    Missing fields are ``None``; a page with none of them is not an error.

    Raises:
        ParseError: If the HTML parser rejects the markup outright.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc)) from exc

    metadata = PageMetadata(
        title=_extract_title(soup),
        description=_meta_content(soup, "name", "description"),
        language=_extract_language(soup),
    )
    logger.debug("Extracted metadata: %s", metadata)
    return metadata
