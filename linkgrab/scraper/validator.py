"""URL validation: only absolute http(s) URLs reach the network."""

from __future__ import annotations

import urllib.parse

from linkgrab.scraper.errors import InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")

# Characters a domain name may never contain (WHATWG forbidden domain code points).
_FORBIDDEN_HOST_CHARS = frozenset(" #/:<>?@[\\]^|%\"") | {chr(c) for c in range(0x20)} | {"\x7f"}


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is a well-formed http(s) URL.

    Raises:
        InvalidUrlError: If the URL cannot be parsed, is relative, has a
            missing or malformed host, or uses a scheme other than
            ``http``/``https``.
    """
    try:
        parsed = urllib.parse.urlsplit(url)
        # Accessing .port validates it (non-numeric or out of range raises).
        parsed.port
    except ValueError as exc:
        raise InvalidUrlError(f"Failed to parse URL '{url}': {exc}") from exc

    if not parsed.scheme:
        raise InvalidUrlError(f"Failed to parse URL '{url}': relative URL without a base")

    scheme = parsed.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlError(
            f"Unsupported scheme '{scheme}'. Only HTTP and HTTPS are supported"
        )

    if not parsed.hostname:
        raise InvalidUrlError(f"Failed to parse URL '{url}': empty host")

    # IPv6 literals are bracketed and already checked by urlsplit.
    if "[" not in parsed.netloc and _FORBIDDEN_HOST_CHARS.intersection(parsed.hostname):
        raise InvalidUrlError(f"Failed to parse URL '{url}': invalid host '{parsed.hostname}'")

    return url
