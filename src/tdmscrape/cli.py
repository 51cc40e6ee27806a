"""Command line interface for tdmscrape."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tdmscrape import __version__
from tdmscrape.exceptions import TdmscrapeError
from tdmscrape.ingestion import ingest_project
from tdmscrape.notebook import render_notebook_markdown, write_notebook
from tdmscrape.prompts import prompt_for_options

logger = logging.getLogger("tdmscrape")

EXIT_ERROR = 1
EXIT_NO_QUESTIONS = 3
EXIT_INTERRUPTED = 130

_EXAMPLE = """\
example:
  tdmscrape "https://the-examples-book.com/projects/current-projects/10100-2023-project01"

The notebook is written to the current directory unless --path is given.

Created by Mukul Agarwal.
Feedback/issues: https://github.com/agarmu/datamine-scraper/issues"""

_VERSION = f"""%(prog)s {__version__}
Created by Mukul Agarwal
Feedback/issues: https://github.com/agarmu/datamine-scraper/issues"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tdmscrape",
        description="Scrape a Data Mine project page into a Jupyter notebook skeleton.",
        epilog=_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="URL of the project page")
    parser.add_argument("-n", "--name", help="name to use for the document")
    parser.add_argument("-i", "--number", type=_positive_int, help="project number")
    parser.add_argument("-p", "--path", type=Path, help="where to write the .ipynb file")
    parser.add_argument(
        "-o", "--overwrite", action="store_true", help="overwrite an existing notebook"
    )
    parser.add_argument(
        "-s",
        "--sub-sub-questions-own-blocks",
        dest="own_blocks",
        action="store_true",
        help="sub-sub-questions get their own code blocks and response area",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    parser.add_argument("--version", action="version", version=_VERSION)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return _run(args)
    except KeyboardInterrupt:
        logger.error("Aborted.")
        return EXIT_INTERRUPTED
    except TdmscrapeError as exc:
        logger.error("%s", exc)
        logger.debug("Traceback:", exc_info=True)
        return EXIT_ERROR


def _run(args: argparse.Namespace) -> int:
    result = ingest_project(args.url)
    if not result.questions:
        if result.section_count == 0:
            logger.error("%s does not look like a project page (no question sections).", args.url)
        else:
            logger.error("No questions found at %s; nothing to generate.", args.url)
        return EXIT_NO_QUESTIONS

    options = prompt_for_options(
        result.source_url,
        name=args.name,
        project_number=args.number,
        output_path=args.path,
        overwrite=args.overwrite,
        subsubquestions_own_blocks=args.own_blocks,
    )
    markdown = render_notebook_markdown(result, options)
    path = write_notebook(markdown, options.output_path, overwrite=options.overwrite)
    print(path)
    return 0


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number
