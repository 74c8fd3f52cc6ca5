"""Query/selection state machine.

A flat mutable state (query text, cursor, selected row) plus the current
results. Commands are processed one at a time; edits re-rank, navigation does
not. Cursor and selection are clamped, never out of range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from applaunch.errors import ErrorCode, LauncherError
from applaunch.models.session import EDIT_COMMANDS, Command, QueryState
from applaunch.ranking import MAX_RESULTS, rank

if TYPE_CHECKING:
    from collections.abc import Sequence

    from applaunch.models.application import Application, Result

log = structlog.get_logger()


class LauncherSession:
    def __init__(
        self, applications: Sequence[Application], *, max_results: int = MAX_RESULTS
    ) -> None:
        if max_results < 1:
            raise ValueError(f"max_results must be >= 1, got {max_results}")
        self._applications = applications
        self._max_results = max_results
        self.query = ""
        self.cursor = 0
        self.selected = 0
        self.results: list[Result] = []
        self.closed = False

    @property
    def state(self) -> QueryState:
        return QueryState(query=self.query, cursor=self.cursor, selected=self.selected)

    @property
    def selected_application(self) -> Application | None:
        if not self.results:
            return None
        return self.results[self.selected].application(self._applications)

    def handle(self, command: Command | str, text: str | None = None) -> Application | None:
        """Apply one command. Returns the application to launch on CONFIRM."""
        try:
            command = Command(command)
        except ValueError as exc:
            raise LauncherError(
                ErrorCode.UNKNOWN_COMMAND,
                f"Unknown command: {command!r}",
                recoverable=True,
            ) from exc
        if self.closed:
            raise LauncherError(ErrorCode.SESSION_CLOSED, f"Session is closed; got {command}")

        if command is Command.CONFIRM:
            return self.selected_application
        if command is Command.CANCEL:
            self.closed = True
            return None

        before = self.query
        if command is Command.INSERT_CHAR:
            self._insert(text)
        elif command is Command.BACKSPACE:
            self._backspace()
        elif command is Command.DELETE:
            self._delete()
        elif command is Command.MOVE_LEFT:
            self.cursor = max(self.cursor - 1, 0)
        elif command is Command.MOVE_RIGHT:
            self.cursor = min(self.cursor + 1, len(self.query))
        elif command is Command.MOVE_HOME:
            self.cursor = 0
        elif command is Command.MOVE_END:
            self.cursor = len(self.query)
        elif command is Command.SELECT_PREV:
            self._select_prev()
        elif command is Command.SELECT_NEXT:
            self._select_next()

        if command in EDIT_COMMANDS and self.query != before:
            self.refresh()
        return None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def insert_char(self, char: str) -> None:
        self.handle(Command.INSERT_CHAR, char)

    def backspace(self) -> None:
        self.handle(Command.BACKSPACE)

    def delete(self) -> None:
        self.handle(Command.DELETE)

    def move_left(self) -> None:
        self.handle(Command.MOVE_LEFT)

    def move_right(self) -> None:
        self.handle(Command.MOVE_RIGHT)

    def move_home(self) -> None:
        self.handle(Command.MOVE_HOME)

    def move_end(self) -> None:
        self.handle(Command.MOVE_END)

    def select_prev(self) -> None:
        self.handle(Command.SELECT_PREV)

    def select_next(self) -> None:
        self.handle(Command.SELECT_NEXT)

    def confirm(self) -> Application | None:
        return self.handle(Command.CONFIRM)

    def cancel(self) -> None:
        self.handle(Command.CANCEL)

    def type_text(self, text: str) -> None:
        """Feed ``text`` one character at a time, as a keyboard would."""
        for char in text:
            self.insert_char(char)

    def refresh(self) -> None:
        """Re-rank against the current query and clamp the selection."""
        self.results = rank(self.query, self._applications, limit=self._max_results)
        if self.selected >= len(self.results):
            self.selected = 0
        log.debug("session_reranked", query=self.query, results=len(self.results))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _insert(self, text: str | None) -> None:
        # Multi-character input events are rejected, not split.
        if text is None or len(text) != 1:
            return
        self.query = self.query[: self.cursor] + text + self.query[self.cursor :]
        self.cursor += 1

    def _backspace(self) -> None:
        if self.cursor > 0:
            self.query = self.query[: self.cursor - 1] + self.query[self.cursor :]
            self.cursor -= 1

    def _delete(self) -> None:
        if self.cursor < len(self.query):
            self.query = self.query[: self.cursor] + self.query[self.cursor + 1 :]

    def _select_prev(self) -> None:
        if not self.results:
            self.selected = 0
            return
        self.selected = self.selected - 1 if self.selected > 0 else len(self.results) - 1

    def _select_next(self) -> None:
        if not self.results:
            self.selected = 0
            return
        self.selected = self.selected + 1 if self.selected < len(self.results) - 1 else 0
