"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from tdmscrape.config import TDMSCRAPE_FETCH_TIMEOUT_S, TDMSCRAPE_USER_AGENT
from tdmscrape.exceptions import FetchError
from tdmscrape.http_utils import fetch_text


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}", request=MagicMock(), response=response
        )
    return response


def _client(response: MagicMock | None = None, error: Exception | None = None) -> MagicMock:
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    if error is not None:
        client.get.side_effect = error
    else:
        client.get.return_value = response
    return client


class TestFetchText:
    """Tests for fetch_text function."""

    def test_returns_text(self) -> None:
        """Returns the response body on success."""
        mock_client = _client(_response(200, "<html>test content</html>"))

        with patch("tdmscrape.http_utils.httpx.Client", return_value=mock_client):
            result = fetch_text("https://example.com")

        assert result == "<html>test content</html>"
        mock_client.get.assert_called_once_with("https://example.com")

    def test_client_configuration(self) -> None:
        """A new client gets the configured timeout, user agent and redirects."""
        mock_client = _client(_response(200, "ok"))

        with patch(
            "tdmscrape.http_utils.httpx.Client", return_value=mock_client
        ) as mock_client_class:
            fetch_text("https://example.com")

        kwargs = mock_client_class.call_args.kwargs
        assert kwargs["timeout"] == httpx.Timeout(TDMSCRAPE_FETCH_TIMEOUT_S)
        assert kwargs["headers"] == {"User-Agent": TDMSCRAPE_USER_AGENT}
        assert kwargs["follow_redirects"] is True

    def test_explicit_timeout(self) -> None:
        """The timeout argument overrides the configured default."""
        mock_client = _client(_response(200, "ok"))

        with patch(
            "tdmscrape.http_utils.httpx.Client", return_value=mock_client
        ) as mock_client_class:
            fetch_text("https://example.com", timeout=5.0)

        assert mock_client_class.call_args.kwargs["timeout"] == httpx.Timeout(5.0)

    def test_uses_given_client(self) -> None:
        """A provided client is used and no new client is created."""
        mock_client = _client(_response(200, "pooled"))

        with patch("tdmscrape.http_utils.httpx.Client") as mock_client_class:
            result = fetch_text("https://example.com", client=mock_client)

        assert result == "pooled"
        mock_client_class.assert_not_called()

    def test_raises_on_404_with_default_message(self) -> None:
        """Raises FetchError on 404 with default message."""
        mock_client = _client(_response(404))

        with pytest.raises(FetchError, match="Resource not found"):
            fetch_text("https://example.com/notfound", client=mock_client)

    def test_raises_custom_exception_on_404(self) -> None:
        """Raises custom exception class on 404 when specified."""

        class CustomError(Exception):
            pass

        mock_client = _client(_response(404))

        with pytest.raises(CustomError, match="Custom 404 message"):
            fetch_text(
                "https://example.com",
                client=mock_client,
                on_404=CustomError,
                on_404_message="Custom 404 message",
            )

    def test_raises_on_server_error_without_retry(self) -> None:
        """A 5xx response fails immediately."""
        mock_client = _client(_response(503))

        with pytest.raises(FetchError, match="HTTP 503"):
            fetch_text("https://example.com", client=mock_client)

        assert mock_client.get.call_count == 1

    def test_wraps_transport_errors(self) -> None:
        """Connection errors are reported as FetchError with the cause chained."""
        error = httpx.ConnectError("connection refused")
        mock_client = _client(error=error)

        with pytest.raises(FetchError, match="connection refused") as exc_info:
            fetch_text("https://example.com", client=mock_client)

        assert exc_info.value.__cause__ is error
        assert mock_client.get.call_count == 1

    def test_wraps_timeouts(self) -> None:
        """Timeouts are transport errors too."""
        mock_client = _client(error=httpx.ReadTimeout("timed out"))

        with pytest.raises(FetchError, match="timed out"):
            fetch_text("https://example.com", client=mock_client)
