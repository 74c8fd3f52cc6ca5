from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from applaunch.models.application import ResultView


class Command(StrEnum):
    INSERT_CHAR = "insert_char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_HOME = "move_home"
    MOVE_END = "move_end"
    SELECT_PREV = "select_prev"
    SELECT_NEXT = "select_next"
    CONFIRM = "confirm"
    CANCEL = "cancel"


# Commands that may change the query text and therefore trigger a re-rank.
EDIT_COMMANDS = frozenset({Command.INSERT_CHAR, Command.BACKSPACE, Command.DELETE})


class QueryState(BaseModel):
    query: str = ""
    cursor: int = 0
    selected: int = 0


class LauncherView(BaseModel):
    """Read-only snapshot consumed by the presentation layer."""

    query: str
    cursor: int
    selected: int
    results: list[ResultView]
    closed: bool = False
