"""Shared schemas for tdmscrape."""

from tdmscrape.schemas.ingestion import IngestionResult
from tdmscrape.schemas.notebook import NotebookOptions
from tdmscrape.schemas.outline import Question, Subquestion

__all__ = ["IngestionResult", "NotebookOptions", "Question", "Subquestion"]
