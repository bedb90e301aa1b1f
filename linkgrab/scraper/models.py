"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

# Query-string keys removed by the tracking-parameter cleaner.
DEFAULT_TRACKING_PARAMS: frozenset[str] = frozenset(
    {
        # Google Analytics & Ads
        "utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content",
        "gclid", "gclsrc", "dclid", "fbclid",
        # Social media
        "igshid", "twclid", "ttclid", "li_fat_id",
        # Email marketing
        "_hsenc", "_hsmi", "vero_conv", "vero_id",
        # Other common trackers
        "ref", "referrer", "source", "campaign", "medium",
        "msclkid", "mc_cid", "mc_eid", "pk_source", "pk_medium", "pk_campaign",
        # Amazon
        "tag", "linkCode", "creativeASIN", "linkId",
        # Generic tracking
        "track", "tracking", "tracker", "affiliate", "aff", "sid",
    }
)


@dataclass(frozen=True)
class FetchConfig:
    """Settings for the single HTTP request made per run."""

    timeout: float
    user_agent: str

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")
        if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in self.user_agent):
            raise ValueError("user agent must not contain control characters")


@dataclass(frozen=True)
class CleanupConfig:
    """Whether to strip tracking parameters, and which ones."""

    enabled: bool = True
    denylist: frozenset[str] = field(default=DEFAULT_TRACKING_PARAMS)

    def with_extra(self, names: Iterable[str]) -> CleanupConfig:
        """Return a copy whose denylist also contains *names*."""
        return replace(self, denylist=self.denylist | frozenset(names))


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class PageMetadata:
    """Fields read from the HTML document itself."""

    title: str | None = None
    description: str | None = None
    language: str | None = None


@dataclass(frozen=True)
class PageRecord:
    """Everything the formatter needs to render one page."""

    url: str
    title: str | None = None
    description: str | None = None
    language: str | None = None

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the JSON output contract.
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "language": self.language,
        }
