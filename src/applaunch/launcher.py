"""Launcher controller.

Owns the indexed applications, one ``LauncherSession`` and the usage store.
This is the only object a UI needs: it feeds commands in through ``handle``
and reads ``view()`` back out. Spawning the selected application is left to
the ``on_launch`` callback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from applaunch.errors import ErrorCode, LauncherError
from applaunch.indexer import index_records
from applaunch.models.session import Command, LauncherView
from applaunch.models.style import StyleAttribute, default_style
from applaunch.ranking import MAX_RESULTS, describe
from applaunch.session import LauncherSession

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from applaunch.models.application import Application, AppRecord
    from applaunch.store import UsageStore

log = structlog.get_logger()


class Launcher:
    def __init__(
        self,
        applications: list[Application],
        store: UsageStore,
        *,
        style: dict[StyleAttribute, str] | None = None,
        max_results: int = MAX_RESULTS,
        on_launch: Callable[[Application], None] | None = None,
    ) -> None:
        self.applications = applications
        self.style = style if style is not None else default_style()
        self.session = LauncherSession(applications, max_results=max_results)
        self._store = store
        self._on_launch = on_launch
        self._by_id = {app.id: app for app in applications}

    @classmethod
    def open(
        cls,
        records: Iterable[AppRecord],
        store: UsageStore,
        *,
        max_results: int = MAX_RESULTS,
        on_launch: Callable[[Application], None] | None = None,
    ) -> Launcher:
        """Index ``records`` and seed launch counts and style from ``store``."""
        applications = index_records(records)
        style, counts = store.load()
        store.apply_counts(applications, counts)
        log.info("launcher_opened", applications=len(applications), counts=len(counts))
        return cls(
            applications,
            store,
            style=style,
            max_results=max_results,
            on_launch=on_launch,
        )

    def handle(self, command: Command | str, text: str | None = None) -> Application | None:
        """Apply a command; on CONFIRM the selected application is launched and returned."""
        app = self.session.handle(command, text)
        if app is not None:
            self.record_launch(app.id)
        return app

    def search(self, query: str) -> LauncherView:
        """Replace the query text as if typed, and return the resulting view."""
        self.session.move_end()
        while self.session.query:
            self.session.backspace()
        self.session.type_text(query)
        return self.view()

    def record_launch(self, app_id: str) -> Application:
        """Notify ``on_launch``, then bump the count and persist it.

        The notifier runs before the save so a broken store never blocks a
        launch. If the save fails the in-memory count keeps the increment and
        is written by the next successful save.
        """
        app = self._by_id.get(app_id)
        if app is None:
            raise LauncherError(ErrorCode.UNKNOWN_APPLICATION, f"Unknown application: {app_id!r}")
        if self._on_launch is not None:
            self._on_launch(app)
        app.count += 1
        log.info("application_launched", app_id=app.id, count=app.count)
        self.save()
        return app

    def set_style(self, attribute: StyleAttribute | str, value: str) -> None:
        try:
            key = StyleAttribute(attribute)
        except ValueError as exc:
            raise LauncherError(
                ErrorCode.INVALID_STYLE_ATTRIBUTE,
                f"Unknown style attribute: {attribute!r}",
                recoverable=True,
            ) from exc
        self.style[key] = value

    def save(self) -> None:
        self._store.save(self.applications, self.style)

    def view(self) -> LauncherView:
        session = self.session
        return LauncherView(
            query=session.query,
            cursor=session.cursor,
            selected=session.selected,
            results=describe(session.results, self.applications, session.query, session.selected),
            closed=session.closed,
        )
