"""Shared HTML utilities for project page processing."""

from __future__ import annotations

import html

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def make_soup(markup: str) -> BeautifulSoup:
    """Parse markup with the lxml parser used throughout tdmscrape."""
    return BeautifulSoup(markup, "lxml")


def inner_html(tag: Tag) -> str:
    """Return the markup inside ``tag`` without the tag itself, stripped."""
    return tag.decode_contents().strip()


def text_fragment(tag: Tag) -> str:
    """Return the whitespace-normalized text of ``tag`` as an HTML fragment.

    The text is escaped so it parses back to the same text.
    """
    text = " ".join(tag.get_text().split())
    return html.escape(text, quote=False)


def select_first_outside_items(container: Tag, selector: str) -> Tag | None:
    """Return the first match of ``selector`` that is not nested in a list item.

    Only ``li`` ancestors below ``container`` count, so lists inside the items
    of an outer list are never returned.
    """
    for match in container.select(selector):
        if not _has_item_ancestor(match, container):
            return match
    return None


def child_tags(tag: Tag, name: str) -> list[Tag]:
    """Return the direct children of ``tag`` named ``name``, in order."""
    return tag.find_all(name, recursive=False)


def _has_item_ancestor(tag: Tag, stop: Tag) -> bool:
    for parent in tag.parents:
        if parent is stop:
            return False
        if parent.name == "li":
            return True
    return False
