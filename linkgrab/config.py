"""Centralised settings for linkgrab.

All runtime defaults are resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Command-line flags
take precedence over both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from linkgrab.scraper.models import CleanupConfig, FetchConfig

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/116.0"
)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _env_list(name: str) -> tuple[str, ...]:
    raw = os.environ.get(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LINKGRAB_TIMEOUT", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("LINKGRAB_USER_AGENT", DEFAULT_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # Tracking-parameter cleanup
    # ------------------------------------------------------------------
    cleanup_tracking: bool = field(
        default_factory=lambda: _env_bool("LINKGRAB_CLEANUP_TRACKING", True)
    )
    extra_tracking_params: tuple[str, ...] = field(
        default_factory=lambda: _env_list("LINKGRAB_EXTRA_TRACKING_PARAMS")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LINKGRAB_LOG_LEVEL", "WARNING").upper()
    )

    def fetch_config(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> FetchConfig:
        """Build a :class:`FetchConfig`, letting explicit arguments win."""
        return FetchConfig(
            timeout=self.request_timeout if timeout is None else timeout,
            user_agent=self.user_agent if user_agent is None else user_agent,
        )

    def cleanup_config(self, enabled: bool | None = None) -> CleanupConfig:
        """Build a :class:`CleanupConfig` from the defaults plus any extra params."""
        config = CleanupConfig(
            enabled=self.cleanup_tracking if enabled is None else enabled,
        )
        if self.extra_tracking_params:
            config = config.with_extra(self.extra_tracking_params)
        return config


# Module-level singleton — import this everywhere:
#   from linkgrab.config import settings
settings = Settings()
