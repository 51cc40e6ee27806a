"""Fetch project pages."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx

from tdmscrape.exceptions import InvalidURLError, PageNotFoundError
from tdmscrape.http_utils import fetch_text

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = {"http", "https"}


def validate_url(url: str) -> str:
    """Return ``url`` stripped, or raise if it is not an absolute http(s) URL."""
    url = url.strip()
    parts = urlsplit(url)
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.hostname:
        raise InvalidURLError(f"Not an absolute http(s) URL: {url!r}")
    return url


def base_domain(url: str) -> str:
    """Return ``scheme://hostname`` for ``url``.

    This is the base that relative links on the page are resolved against.
    The port and path are dropped; IPv6 hosts keep their brackets.
    """
    parts = urlsplit(validate_url(url))
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    return f"{parts.scheme.lower()}://{host}"


def fetch_project_html(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch the HTML of a project page.

    Raises:
        InvalidURLError: If ``url`` is not an absolute http(s) URL.
        PageNotFoundError: If the page returns 404.
        FetchError: If any other network error occurs.
    """
    url = validate_url(url)
    logger.info("Fetching %s", url)
    html = fetch_text(
        url,
        client=client,
        on_404=PageNotFoundError,
        on_404_message=f"No project page at {url} (HTTP 404).",
    )
    logger.debug("Fetched %d characters from %s", len(html), url)
    return html
