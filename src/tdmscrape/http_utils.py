"""HTTP utilities for fetching project pages."""

from __future__ import annotations

from typing import Final

import httpx

from tdmscrape.config import TDMSCRAPE_FETCH_TIMEOUT_S, TDMSCRAPE_USER_AGENT
from tdmscrape.exceptions import FetchError

_MAX_REDIRECTS: Final[int] = 5


def fetch_text(
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch a URL once and return the decoded body.

    Failures are not retried: the first error is reported to the caller.

    Args:
        url: The URL to fetch.
        client: Optional httpx.Client to reuse. If not provided, a new client
            is created for this request.
        timeout: Request timeout in seconds. Defaults to
            TDMSCRAPE_FETCH_TIMEOUT_S. Ignored when ``client`` is given.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The response body as text.

    Raises:
        FetchError (or custom on_404 exception): If the request fails, returns
            a non-2xx status, or returns 404.
    """
    not_found_exc_class = on_404 or FetchError

    def do_fetch(http_client: httpx.Client) -> str:
        try:
            response = http_client.get(url)
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

        if response.status_code == 404:
            message = on_404_message or f"Resource not found at {url}"
            raise not_found_exc_class(message)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(f"HTTP {response.status_code} from {url}") from exc
        return response.text

    if client is not None:
        return do_fetch(client)

    with httpx.Client(
        timeout=httpx.Timeout(timeout if timeout is not None else TDMSCRAPE_FETCH_TIMEOUT_S),
        headers={"User-Agent": TDMSCRAPE_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return do_fetch(new_client)
