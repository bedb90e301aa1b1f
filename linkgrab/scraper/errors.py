"""Error taxonomy for a single scrape run.

Every error is terminal: the scraper package raises, only the CLI catches.
"""

from __future__ import annotations

SNIPPET_LIMIT = 200


class ScraperError(Exception):
    """Base class for every failure surfaced by :func:`grab_url`."""


class InvalidUrlError(ScraperError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid URL: {reason}")


class NetworkError(ScraperError):
    """DNS, connection or TLS failure before a response arrived."""

    def __init__(self, cause: str, url: str) -> None:
        self.cause = cause
        self.url = url
        super().__init__(f"Network error: {cause} ({url})")


class FetchTimeoutError(ScraperError):
    def __init__(self, timeout: float, url: str) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(f"Timeout error: no response from {url} within {timeout:g}s")


class HttpStatusError(ScraperError):
    """A response arrived but its status code signals failure."""

    kind = "HTTP error"

    def __init__(self, status: int, body_snippet: str, url: str, truncated: bool = False) -> None:
        self.status = status
        self.body_snippet = body_snippet
        self.url = url
        self.truncated = truncated
        suffix = "... [truncated]" if truncated else ""
        super().__init__(f"{self.kind} (status: {status}): {url} - {body_snippet}{suffix}")

    @classmethod
    def from_body(cls, status: int, body: str, url: str) -> HttpStatusError:
        """Build the error, keeping at most :data:`SNIPPET_LIMIT` characters of *body*."""
        truncated = len(body) > SNIPPET_LIMIT
        return cls(status, body[:SNIPPET_LIMIT], url, truncated=truncated)


class ClientError(HttpStatusError):
    kind = "Client error"


class ServerError(HttpStatusError):
    kind = "Server error"


class ParseError(ScraperError):
    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Parse error: {cause}")
