"""Single-shot HTTP fetcher.

Uses ``httpx`` for the request.  Exactly one attempt is made; every failure
is translated into the scraper error taxonomy and raised immediately.
"""

from __future__ import annotations

import logging
from time import monotonic

import httpx

from linkgrab.scraper.errors import ClientError, FetchTimeoutError, NetworkError, ServerError
from linkgrab.scraper.models import FetchConfig, RawPage

logger = logging.getLogger(__name__)

# httpx decodes gzip/deflate bodies transparently.
_ACCEPT_ENCODING = "gzip, deflate"


def build_client(config: FetchConfig) -> httpx.Client:
    """Return an ``httpx.Client`` configured from *config*."""
    return httpx.Client(
        headers={
            "User-Agent": config.user_agent,
            "Accept-Encoding": _ACCEPT_ENCODING,
        },
        timeout=config.timeout,
        follow_redirects=True,
    )


def _read_within(response: httpx.Response, deadline: float, config: FetchConfig, url: str) -> str:
    """Decode the body, failing once the whole request has outlived *deadline*.

    httpx timeouts bound each connect/read separately; this bounds the total.
    """
    chunks: list[str] = []
    for chunk in response.iter_text():
        chunks.append(chunk)
        if monotonic() > deadline:
            raise FetchTimeoutError(config.timeout, url)
    if monotonic() > deadline:
        raise FetchTimeoutError(config.timeout, url)
    return "".join(chunks)


def _get(client: httpx.Client, url: str, config: FetchConfig) -> RawPage:
    deadline = monotonic() + config.timeout
    try:
        with client.stream("GET", url) as response:
            body = _read_within(response, deadline, config, url)
    except httpx.TimeoutException as exc:
        logger.debug("Request to %s timed out: %r", url, exc)
        raise FetchTimeoutError(config.timeout, url) from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        # RequestError covers DNS, refused connections, TLS and decoding failures.
        raise NetworkError(str(exc) or type(exc).__name__, url) from exc

    status = response.status_code
    logger.debug("HTTP %s from %s", status, response.url)

    if response.is_client_error:
        raise ClientError.from_body(status, body, url)
    if response.is_server_error:
        raise ServerError.from_body(status, body, url)

    return RawPage(url=url, html=body, status_code=status)


def fetch_html(url: str, config: FetchConfig, client: httpx.Client | None = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    A caller-supplied *client* is used as-is and left open; otherwise one is
    built from *config* and closed before returning.

    Raises:
        ClientError: On a 4xx response.
        ServerError: On a 5xx response.
        FetchTimeoutError: If the whole request, body included, takes longer
            than ``config.timeout``.
        NetworkError: On DNS, connection or TLS failure.
    """
    logger.info("Fetching %s (timeout=%ss)", url, config.timeout)

    if client is not None:
        return _get(client, url, config)

    with build_client(config) as own_client:
        return _get(own_client, url, config)
