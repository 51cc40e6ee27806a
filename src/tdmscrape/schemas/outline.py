"""Question outline models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Subquestion(BaseModel):
    """A lettered part of a question, with optional numbered parts below it."""

    header: NonEmptyStr
    subsubquestions: list[NonEmptyStr] = Field(default_factory=list)


class Question(BaseModel):
    """A top-level project question.

    ``desc`` is empty when the page has no bold description for the question.
    """

    header: NonEmptyStr
    desc: str = ""
    subquestions: list[Subquestion] = Field(default_factory=list)
