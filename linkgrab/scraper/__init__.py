"""Scraper package — URL validation, cleanup, fetch & metadata extraction."""

from linkgrab.scraper.cleaner import cleanup_tracking_params
from linkgrab.scraper.errors import (
    ClientError,
    FetchTimeoutError,
    InvalidUrlError,
    NetworkError,
    ParseError,
    ScraperError,
    ServerError,
)
from linkgrab.scraper.extractor import extract_metadata
from linkgrab.scraper.fetcher import fetch_html
from linkgrab.scraper.models import (
    DEFAULT_TRACKING_PARAMS,
    CleanupConfig,
    FetchConfig,
    PageMetadata,
    PageRecord,
    RawPage,
)
from linkgrab.scraper.pipeline import grab_url
from linkgrab.scraper.validator import validate_url

__all__ = [
    "grab_url",
    "validate_url",
    "cleanup_tracking_params",
    "fetch_html",
    "extract_metadata",
    "DEFAULT_TRACKING_PARAMS",
    "CleanupConfig",
    "FetchConfig",
    "PageMetadata",
    "PageRecord",
    "RawPage",
    "ScraperError",
    "InvalidUrlError",
    "NetworkError",
    "FetchTimeoutError",
    "ClientError",
    "ServerError",
    "ParseError",
]
