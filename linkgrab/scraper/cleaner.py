"""Tracking-parameter cleanup for page URLs.

Only the query string is touched.  Everything before the ``?`` and from the
``#`` onwards is copied verbatim, and parameters that survive keep their
original position and percent-encoding, so cleaning an already-clean URL
returns it byte-for-byte.
"""

from __future__ import annotations

import logging
import urllib.parse

from linkgrab.scraper.models import CleanupConfig

logger = logging.getLogger(__name__)


def _param_name(segment: str) -> str:
    name = segment.split("=", 1)[0]
    return urllib.parse.unquote_plus(name)


def cleanup_tracking_params(url: str, config: CleanupConfig) -> str:
    """Remove every denylisted query parameter from *url*.

    Matching is an exact, case-sensitive comparison of the decoded parameter
    name against ``config.denylist``.  When ``config.enabled`` is false the
    URL is returned untouched.
    """
    if not config.enabled:
        return url

    head, hash_mark, fragment = url.partition("#")
    base, question_mark, query = head.partition("?")
    if not question_mark or not query:
        return url

    kept: list[str] = []
    removed: list[str] = []
    for segment in query.split("&"):
        if not segment:
            continue
        name = _param_name(segment)
        if name in config.denylist:
            removed.append(name)
        else:
            kept.append(segment)

    if not removed:
        return url

    logger.debug("Removed tracking parameters %s from %s", removed, url)
    cleaned = base
    if kept:
        cleaned += "?" + "&".join(kept)
    return cleaned + hash_mark + fragment
