"""Ingestion pipeline for project page -> question outline."""

from __future__ import annotations

import logging

import httpx

from tdmscrape.exceptions import ConversionError
from tdmscrape.fetch import base_domain, fetch_project_html
from tdmscrape.html_parser import parse_project_html
from tdmscrape.markdown import convert_fragment_to_markdown
from tdmscrape.schemas import IngestionResult, Question, Subquestion

logger = logging.getLogger(__name__)


def ingest_project(url: str, *, client: httpx.Client | None = None) -> IngestionResult:
    """Fetch, parse, and sanitize a project page.

    An empty ``questions`` list is a valid result. ``section_count`` and
    ``skipped_sections`` on the result say why it is empty.

    Args:
        url: Absolute URL of the project page.
        client: Optional httpx.Client to reuse for the request.

    Returns:
        The sanitized outline and whether any sub-subquestions exist.

    Raises:
        FetchError: If the page cannot be fetched.
        MalformedPageError: If a question section breaks the list layout.
        ConversionError: If a text field cannot be converted to Markdown.
    """
    html = fetch_project_html(url, client=client)
    parsed = parse_project_html(html)

    if parsed.section_count == 0:
        logger.warning("No question sections found at %s; is this a project page?", url)
    elif not parsed.questions:
        logger.warning(
            "None of the %d section(s) at %s is a question (skipped: %s)",
            parsed.section_count,
            url,
            ", ".join(repr(header) for header in parsed.skipped_sections),
        )

    questions, has_subsubquestions = sanitize_questions(parsed.questions, base_domain(url))
    logger.info(
        "Found %d question(s) with %d subquestion(s) at %s",
        len(questions),
        sum(len(question.subquestions) for question in questions),
        url,
    )
    return IngestionResult(
        source_url=url,
        questions=questions,
        has_subsubquestions=has_subsubquestions,
        section_count=parsed.section_count,
        skipped_sections=parsed.skipped_sections,
    )


def sanitize_questions(
    questions: list[Question], domain: str
) -> tuple[list[Question], bool]:
    """Convert every text field of the outline from HTML to Markdown.

    The input questions are left untouched; a new outline with the same shape
    is returned together with a flag that is True when any subquestion has
    sub-subquestions.

    Raises:
        ConversionError: If any field fails to convert. Nothing is returned
            in that case.
    """
    sanitized: list[Question] = []
    has_subsubquestions = False
    for q_index, question in enumerate(questions):
        prefix = f"questions[{q_index}]"
        subquestions: list[Subquestion] = []
        for sq_index, subquestion in enumerate(question.subquestions):
            sq_prefix = f"{prefix}.subquestions[{sq_index}]"
            subsubquestions = [
                _convert_required(text, domain, f"{sq_prefix}.subsubquestions[{ssq_index}]")
                for ssq_index, text in enumerate(subquestion.subsubquestions)
            ]
            if subsubquestions:
                has_subsubquestions = True
            subquestions.append(
                Subquestion(
                    header=_convert_required(subquestion.header, domain, f"{sq_prefix}.header"),
                    subsubquestions=subsubquestions,
                )
            )
        sanitized.append(
            Question(
                header=_convert_required(question.header, domain, f"{prefix}.header"),
                desc=_convert(question.desc, domain, f"{prefix}.desc"),
                subquestions=subquestions,
            )
        )
    return sanitized, has_subsubquestions


def _convert(html: str, domain: str, field_path: str) -> str:
    try:
        return convert_fragment_to_markdown(html, base_url=domain)
    except ConversionError as exc:
        raise ConversionError(f"Failed to convert {field_path}: {exc}") from exc


def _convert_required(html: str, domain: str, field_path: str) -> str:
    markdown = _convert(html, domain, field_path)
    if not markdown:
        raise ConversionError(f"{field_path} is empty after conversion: {html!r}")
    return markdown
