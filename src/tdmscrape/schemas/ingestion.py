"""Ingestion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tdmscrape.schemas.outline import Question


class IngestionResult(BaseModel):
    """Sanitized outline of one project page.

    Attributes:
        source_url: URL the page was fetched from.
        questions: Questions with Markdown text fields, in page order.
        has_subsubquestions: True if any subquestion has sub-subquestions.
        section_count: Number of section containers found on the page.
        skipped_sections: Headings of sections that were not questions.
    """

    source_url: str
    questions: list[Question] = Field(default_factory=list)
    has_subsubquestions: bool = False
    section_count: int = Field(0, ge=0)
    skipped_sections: list[str] = Field(default_factory=list)
