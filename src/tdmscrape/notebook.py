"""Render a question outline into a Jupyter notebook skeleton."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path

from tdmscrape.config import TDMSCRAPE_PANDOC_PATH
from tdmscrape.exceptions import NotebookError
from tdmscrape.schemas import IngestionResult, NotebookOptions, Question, Subquestion

logger = logging.getLogger(__name__)

_ROMAN_NUMERALS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)

_FRONT_MATTER = """---
title: My notebook
jupyter:
  nbformat: 4
  nbformat_minor: 5
---"""

_PREAMBLE = """:::::: {{.cell .markdown}}
# Project {number} -- {name}

_This skeleton for this file was generated by [tdmscrape](https://github.com/agarmu/datamine-scraper) from the contents of [this url]({url})._
::::::

:::::: {{.cell .markdown}}
**TA Help:** John Smith, Alice Jones

- Help with figuring out how to write a function.

**Collaboration:** Friend1, Friend2

- Helped figuring out how to load the dataset.
- Helped debug error with my plot.
::::::"""

_PLEDGE = """:::::: {.cell .markdown}
## Pledge

By submitting this work I hereby pledge that this is my own, personal work. I've acknowledged in the designated place at the top of this file all sources that I used to complete said work, including but not limited to: online resources, books, and electronic communications. I've noted all collaboration with fellow students and/or TA's. I did not copy or plagiarize another's work.

> As a Boilermaker pursuing academic excellence, I pledge to be honest and true in all that I do. Accountable together – We are Purdue.
::::::"""

_CODE_CELL = ":::::: {.cell .code}\n::::::"
_NOTES_CELL = ":::::: {.cell .markdown}\nMarkdown notes and sentences and analysis written here.\n::::::"


def subquestion_label(index: int) -> str:
    """Return the letter label for a zero-based subquestion index (A, B, ..., AA)."""
    if index < 0:
        raise ValueError(f"Subquestion index must be non-negative, got {index}")
    label = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def roman_numeral(number: int) -> str:
    """Return ``number`` as a lower-case roman numeral."""
    if not 1 <= number <= 3999:
        raise ValueError(f"Roman numerals need 1 <= number <= 3999, got {number}")
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


def render_notebook_markdown(result: IngestionResult, options: NotebookOptions) -> str:
    """Create the pandoc Markdown source of the notebook.

    Sub-subquestions get their own cells only when ``options`` asks for it and
    the outline has any; otherwise they are listed inside their subquestion
    cell. Either way every subquestion is followed by a code cell.
    """
    own_blocks = options.subsubquestions_own_blocks and result.has_subsubquestions
    if options.subsubquestions_own_blocks and not own_blocks:
        logger.warning("No sub-subquestions found; ignoring the own-blocks layout")

    blocks = [
        _FRONT_MATTER,
        _PREAMBLE.format(
            number=options.project_number, name=options.name, url=options.source_url
        ),
        _CODE_CELL,
    ]
    for question in result.questions:
        blocks.extend(_render_question(question, own_blocks=own_blocks))
    blocks.append(_PLEDGE)
    return "\n\n".join(blocks) + "\n"


def _render_question(question: Question, *, own_blocks: bool) -> list[str]:
    cell = f"## {question.header}"
    if question.desc:
        cell += f"\n\n**{question.desc}**"
    blocks = [f":::::: {{.cell .markdown}}\n{cell}\n::::::"]
    for index, subquestion in enumerate(question.subquestions):
        blocks.extend(_render_subquestion(index, subquestion, own_blocks=own_blocks))
    return blocks


def _render_subquestion(index: int, subquestion: Subquestion, *, own_blocks: bool) -> list[str]:
    header = f"**{subquestion_label(index)}. {subquestion.header}**"
    if not own_blocks:
        lines = [header]
        if subquestion.subsubquestions:
            lines.append(
                "\n".join(
                    f"*{roman_numeral(number)}. {text}*<br/>"
                    for number, text in enumerate(subquestion.subsubquestions, start=1)
                )
            )
        cell = "\n\n".join(lines)
        return [f":::::: {{.cell .markdown}}\n{cell}\n::::::", _CODE_CELL, _NOTES_CELL]

    blocks = [f":::::: {{.cell .markdown}}\n{header}\n::::::"]
    if not subquestion.subsubquestions:
        return [*blocks, _CODE_CELL, _NOTES_CELL]
    for number, text in enumerate(subquestion.subsubquestions, start=1):
        blocks.append(f":::::: {{.cell .markdown}}\n*{roman_numeral(number)}. {text}*\n::::::")
        blocks.append(_CODE_CELL)
        blocks.append(_NOTES_CELL)
    return blocks


def write_notebook(markdown: str, output_path: Path, *, overwrite: bool = False) -> Path:
    """Convert notebook Markdown to ``.ipynb`` with pandoc.

    Args:
        markdown: Output of render_notebook_markdown.
        output_path: Where to write the notebook.
        overwrite: Replace ``output_path`` if it already exists.

    Returns:
        The absolute path that was written.

    Raises:
        NotebookError: If the path exists and ``overwrite`` is False, or if
            pandoc is not available or fails.
    """
    output_path = Path(output_path).expanduser().resolve()
    if output_path.exists() and not overwrite:
        raise NotebookError(f"{output_path} already exists (use --overwrite to replace it)")
    if output_path.suffix != ".ipynb":
        logger.warning("Output path %s does not use the .ipynb extension", output_path)

    _check_pandoc()
    with tempfile.TemporaryDirectory(prefix="tdmscrape-") as tmp_dir:
        source = Path(tmp_dir) / "notebook.md"
        source.write_text(markdown, encoding="utf-8")
        result = _run_pandoc(
            [str(source), "--from", "markdown", "--to", "ipynb", "--output", str(output_path)]
        )
    if result.returncode != 0:
        raise NotebookError(f"Pandoc conversion failed: {result.stderr}")

    logger.info("Wrote notebook to %s", output_path)
    return output_path


def _check_pandoc() -> None:
    result = _run_pandoc(["--version"])
    if result.returncode != 0:
        raise NotebookError(f"Unable to execute pandoc: {result.stderr}")
    logger.debug("Using %s", result.stdout.splitlines()[0] if result.stdout else "pandoc")


def _run_pandoc(args: list[str]) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            [TDMSCRAPE_PANDOC_PATH, *args],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise NotebookError(
            f"pandoc was not found (looked for {TDMSCRAPE_PANDOC_PATH!r}); "
            "install it from https://pandoc.org"
        ) from exc
