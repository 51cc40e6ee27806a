"""Custom exceptions for tdmscrape."""

from __future__ import annotations


class TdmscrapeError(Exception):
    """Base exception for tdmscrape operations."""


class FetchError(TdmscrapeError):
    """Error during page fetching."""


class InvalidURLError(FetchError):
    """URL is not an absolute http(s) address."""


class PageNotFoundError(FetchError):
    """Project page returned 404."""


class ParseError(TdmscrapeError):
    """Error during page parsing."""


class MalformedPageError(ParseError):
    """Page does not follow the project question layout.

    ``context`` holds the question header or raw item text where the
    violation was found.
    """

    def __init__(self, message: str, *, context: str | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConversionError(TdmscrapeError):
    """Error converting an HTML fragment to Markdown."""


class NotebookError(TdmscrapeError):
    """Error writing the notebook with pandoc."""


class PromptAbortedError(TdmscrapeError):
    """Interactive input was closed before all options were collected."""
