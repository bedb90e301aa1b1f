"""Utilities for rendering a :class:`PageRecord` in the CLI."""

from __future__ import annotations

import json
from enum import Enum

from linkgrab.scraper.models import PageRecord

NO_TITLE = "No title"


class Style(str, Enum):
    full = "full"
    link = "link"


class OutputFormat(str, Enum):
    markdown = "markdown"
    json = "json"


def render_markdown(record: PageRecord, style: Style) -> str:
    """Render *record* as a markdown link.

    ``full`` yields a list item, followed by a hard line break and the
    description when one exists.  ``link`` yields the bare link.
    """
    title = record.title or NO_TITLE
    link = f"[{title}]({record.url})"
    if style is Style.link:
        return link
    line = f"- {link}"
    if record.description:
        return f"{line}\\\n{record.description}"
    return line


def render_json(record: PageRecord) -> str:
    """Render *record* as pretty JSON; every key is present, absent fields are null."""
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)


def render(record: PageRecord, style: Style, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.json:
        return render_json(record)
    return render_markdown(record, style)
