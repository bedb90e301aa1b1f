"""The grab pipeline: validate, clean, fetch, extract."""

from __future__ import annotations

import logging
from typing import Callable

from linkgrab.scraper.cleaner import cleanup_tracking_params
from linkgrab.scraper.extractor import extract_metadata
from linkgrab.scraper.fetcher import fetch_html
from linkgrab.scraper.models import CleanupConfig, FetchConfig, PageRecord, RawPage
from linkgrab.scraper.validator import validate_url

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, FetchConfig], RawPage]


def grab_url(
    url: str,
    fetch_config: FetchConfig,
    cleanup_config: CleanupConfig,
    fetch: Fetcher = fetch_html,
) -> PageRecord:
    """Build a :class:`PageRecord` for *url*.

    The URL is validated, stripped of tracking parameters when enabled, and
    the cleaned URL is the one fetched and reported.  *fetch* is the only
    I/O boundary and can be swapped for a fixture.

    Raises:
        ScraperError: Any subclass; nothing is caught here.
    """
    validate_url(url)
    cleaned_url = cleanup_tracking_params(url, cleanup_config)
    if cleaned_url != url:
        logger.info("Cleaned URL: %s", cleaned_url)

    raw = fetch(cleaned_url, fetch_config)
    metadata = extract_metadata(raw.html)

    return PageRecord(
        url=cleaned_url,
        title=metadata.title,
        description=metadata.description,
        language=metadata.language,
    )
