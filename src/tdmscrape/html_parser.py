"""Parse a project page into its question outline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tdmscrape.exceptions import MalformedPageError, ParseError
from tdmscrape.html_utils import (
    child_tags,
    inner_html,
    make_soup,
    select_first_outside_items,
    text_fragment,
)
from tdmscrape.schemas import Question, Subquestion

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

# Asciidoctor markup used by the project pages.
SECTION_SELECTOR = ".sect2"
HEADING_TAG = "h3"
DESCRIPTION_SELECTOR = ".paragraph strong"
ORDERED_LIST_SELECTOR = ".olist ol"
UNORDERED_LIST_SELECTOR = ".ulist ul"
QUESTION_MARKER = "Question"


@dataclass
class ParsedProject:
    """Outline extracted from a project page.

    ``section_count`` and ``skipped_sections`` tell a page without any
    sections apart from a page whose sections are all introductory text.
    """

    questions: list[Question] = field(default_factory=list)
    section_count: int = 0
    skipped_sections: list[str] = field(default_factory=list)


def parse_project_html(html: str | BeautifulSoup) -> ParsedProject:
    """Extract the question outline from project page HTML.

    Text fields of the returned questions are HTML fragments.

    Raises:
        MalformedPageError: If a question section breaks the expected list
            layout. Nothing is returned in that case.
    """
    soup = make_soup(html) if isinstance(html, str) else html
    sections = soup.select(SECTION_SELECTOR)
    parsed = ParsedProject(section_count=len(sections))

    for section in sections:
        heading = section.find(HEADING_TAG)
        header = text_fragment(heading) if heading else ""
        if QUESTION_MARKER not in header:
            logger.debug("Skipping non-question section %r", header)
            parsed.skipped_sections.append(header)
            continue
        parsed.questions.append(_extract_question(section, header))

    logger.debug(
        "Extracted %d question(s) from %d section(s)",
        len(parsed.questions),
        parsed.section_count,
    )
    return parsed


def extract_questions(html: str | BeautifulSoup) -> list[Question]:
    """Return only the questions of a project page, in page order."""
    return parse_project_html(html).questions


def _extract_question(section: Tag, header: str) -> Question:
    desc_tag = section.select_one(DESCRIPTION_SELECTOR)
    desc = inner_html(desc_tag) if desc_tag else ""

    question_list = _find_list(section)
    if question_list is None:
        raise MalformedPageError(
            f"No subquestion list found under {header!r}", context=header
        )

    items = child_tags(question_list, "li")
    if not items:
        raise MalformedPageError(
            f"Subquestion list under {header!r} has no items", context=header
        )

    subquestions = [_extract_subquestion(item) for item in items]
    return Question(header=header, desc=desc, subquestions=subquestions)


def _extract_subquestion(item: Tag) -> Subquestion:
    header = _item_paragraph(item)
    nested = _find_list(item)
    subsubquestions = (
        [_item_paragraph(child) for child in child_tags(nested, "li")] if nested else []
    )
    return Subquestion(header=header, subsubquestions=subsubquestions)


def _find_list(container: Tag) -> Tag | None:
    """Find the first ordered list, falling back to the first unordered list."""
    found = select_first_outside_items(container, ORDERED_LIST_SELECTOR)
    if found is None:
        found = select_first_outside_items(container, UNORDERED_LIST_SELECTOR)
    return found


def _item_paragraph(item: Tag) -> str:
    paragraphs = child_tags(item, "p")
    raw_text = item.get_text(" ", strip=True)
    if len(paragraphs) != 1:
        raise MalformedPageError(
            f"Expected exactly one paragraph in list item, found {len(paragraphs)}: "
            f"{raw_text!r}",
            context=raw_text,
        )
    text = inner_html(paragraphs[0])
    if not text:
        raise MalformedPageError(f"Empty list item paragraph: {raw_text!r}", context=raw_text)
    return text
