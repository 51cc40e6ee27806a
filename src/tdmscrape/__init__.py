"""tdmscrape: turn Data Mine project pages into Jupyter notebook skeletons."""

__version__ = "0.2.0"

from tdmscrape.exceptions import (  # noqa: E402
    ConversionError,
    FetchError,
    InvalidURLError,
    MalformedPageError,
    NotebookError,
    PageNotFoundError,
    ParseError,
    PromptAbortedError,
    TdmscrapeError,
)
from tdmscrape.html_parser import ParsedProject, extract_questions, parse_project_html  # noqa: E402
from tdmscrape.ingestion import ingest_project, sanitize_questions  # noqa: E402
from tdmscrape.notebook import render_notebook_markdown, write_notebook  # noqa: E402
from tdmscrape.schemas import IngestionResult, NotebookOptions, Question, Subquestion  # noqa: E402

__all__ = [
    "ConversionError",
    "FetchError",
    "IngestionResult",
    "InvalidURLError",
    "MalformedPageError",
    "NotebookError",
    "NotebookOptions",
    "PageNotFoundError",
    "ParseError",
    "ParsedProject",
    "PromptAbortedError",
    "Question",
    "Subquestion",
    "TdmscrapeError",
    "__version__",
    "extract_questions",
    "ingest_project",
    "parse_project_html",
    "render_notebook_markdown",
    "sanitize_questions",
    "write_notebook",
]
