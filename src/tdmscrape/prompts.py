"""Interactive prompts for notebook options the user did not pass as flags."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from tdmscrape.exceptions import PromptAbortedError
from tdmscrape.schemas import NotebookOptions

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


def default_filename(name: str, project_number: int) -> str:
    """Return e.g. ``first-last-project03.ipynb`` for ``("First Last", 3)``."""
    dashed = "-".join(name.lower().split())
    return f"{dashed}-project{project_number:02d}.ipynb"


def prompt_for_options(
    source_url: str,
    *,
    name: str | None = None,
    project_number: int | None = None,
    output_path: Path | None = None,
    overwrite: bool = False,
    subsubquestions_own_blocks: bool = False,
    input_func: InputFunc = input,
    cwd: Path | None = None,
) -> NotebookOptions:
    """Ask for whichever of name, project number and output path are missing.

    Raises:
        PromptAbortedError: If input ends (EOF) before every value is known.
    """
    name = (name or "").strip()
    while not name:
        name = _ask(input_func, "What is your name? [First Last]: ")
        if not name:
            print("Error: Name is required.")

    while project_number is None or project_number <= 0:
        answer = _ask(input_func, "What is the project number? ")
        try:
            project_number = int(answer)
        except ValueError:
            print("Error: Input was not a number.")
            continue
        if project_number <= 0:
            print("Error: Project number must be positive.")

    if output_path is None:
        default_path = (cwd or Path.cwd()) / default_filename(name, project_number)
        output_path = _ask_output_path(input_func, default_path, overwrite=overwrite)
    logger.debug("Notebook for %s, project %d goes to %s", name, project_number, output_path)

    return NotebookOptions(
        name=name,
        project_number=project_number,
        output_path=output_path,
        source_url=source_url,
        subsubquestions_own_blocks=subsubquestions_own_blocks,
        overwrite=overwrite,
    )


def _ask_output_path(input_func: InputFunc, default_path: Path, *, overwrite: bool) -> Path:
    while True:
        answer = _ask(input_func, f"Where would you like to store this file? [{default_path}]: ")
        path = Path(answer).expanduser().resolve() if answer else default_path
        if path.suffix != ".ipynb":
            print("Warning: .ipynb extension not used.")
        if path.exists() and not overwrite:
            print("That path already exists! Pick another one.")
            continue
        return path


def _ask(input_func: InputFunc, prompt: str) -> str:
    try:
        return input_func(prompt).strip()
    except EOFError as exc:
        raise PromptAbortedError("Input closed before all options were given") from exc
