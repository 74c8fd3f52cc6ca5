from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator

NAME_WEIGHT = 1000
DESCRIPTION_WEIGHT = 1


class Keyword(BaseModel):
    """Lower-cased searchable token with a provenance weight."""

    word: str
    weight: int


class AppRecord(BaseModel):
    """Raw application record as produced by a record source.

    Every text field is already resolved to a single value; absent fields are
    empty strings and simply never match a non-empty query.
    """

    id: str
    name: str = ""
    generic_name: str = ""
    comment: str = ""
    launch_command: str = ""
    keyword_hints: str | None = None

    @field_validator("name", "generic_name", "comment", "launch_command", mode="before")
    @classmethod
    def none_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v


class Application(BaseModel):
    """Indexed application. Only ``count`` changes after indexing."""

    id: str  # join key against the usage store, e.g. the .desktop file path
    name: str = ""
    generic_name: str = ""
    comment: str = ""
    launch_command: str = ""
    keywords: list[Keyword] = []
    count: int = Field(default=0, ge=0)


class Result(BaseModel):
    """Ranked reference to an application by its position in the indexed list."""

    index: int
    score: int

    def application(self, applications: Sequence[Application]) -> Application:
        return applications[self.index]


class MatchSpan(BaseModel):
    start: int
    length: int


class ResultView(BaseModel):
    """Single row handed to the rendering layer."""

    id: str
    name: str
    comment: str
    score: int
    selected: bool = False
    name_match: MatchSpan | None = None
    comment_match: MatchSpan | None = None
