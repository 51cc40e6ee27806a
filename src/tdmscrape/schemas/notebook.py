"""Notebook generation options."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class NotebookOptions(BaseModel):
    """Options for rendering and writing the notebook skeleton."""

    name: str = Field(..., min_length=1)
    project_number: int = Field(..., gt=0)
    output_path: Path
    source_url: str
    subsubquestions_own_blocks: bool = False
    overwrite: bool = False
