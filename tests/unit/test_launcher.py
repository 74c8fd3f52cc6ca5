"""Unit tests for applaunch.launcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from applaunch.errors import ErrorCode, LauncherError
from applaunch.launcher import Launcher
from applaunch.models.application import Application, AppRecord, MatchSpan
from applaunch.models.session import Command
from applaunch.models.style import DEFAULT_STYLE, StyleAttribute
from applaunch.store import FileKeyValueSource, MemoryKeyValueSource, UsageStore

if TYPE_CHECKING:
    from pathlib import Path

FIREFOX_ID = "/apps/firefox.desktop"
FILES_ID = "/apps/files.desktop"
FONT_VIEWER_ID = "/apps/fontviewer.desktop"


@pytest.fixture()
def launched() -> list[Application]:
    return []


@pytest.fixture()
def launcher(
    sample_records: list[AppRecord], usage_store: UsageStore, launched: list[Application]
) -> Launcher:
    return Launcher.open(sample_records, usage_store, on_launch=launched.append)


class TestOpen:
    def test_seeds_counts_and_style_from_store(self, sample_records: list[AppRecord]) -> None:
        source = MemoryKeyValueSource(
            style={StyleAttribute.HIGHLIGHT: "#ff0000"}, counts={FILES_ID: 3}
        )
        launcher = Launcher.open(sample_records, UsageStore(source))
        files = next(a for a in launcher.applications if a.id == FILES_ID)
        assert files.count == 3
        assert launcher.style[StyleAttribute.HIGHLIGHT] == "#ff0000"
        assert launcher.style[StyleAttribute.BOLD] == DEFAULT_STYLE[StyleAttribute.BOLD]

    def test_counts_bias_ties(self, sample_records: list[AppRecord]) -> None:
        source = MemoryKeyValueSource(counts={FONT_VIEWER_ID: 1})
        launcher = Launcher.open(sample_records, UsageStore(source))
        view = launcher.search("f")
        assert view.results[0].id == FONT_VIEWER_ID


class TestLaunch:
    def test_confirm_records_launch_and_saves(
        self,
        launcher: Launcher,
        memory_source: MemoryKeyValueSource,
        launched: list[Application],
    ) -> None:
        launcher.search("fire")
        app = launcher.handle(Command.CONFIRM)
        assert app is not None
        assert app.id == FIREFOX_ID
        assert app.count == 1
        assert memory_source.counts == {FIREFOX_ID: 1}
        assert memory_source.saves == 1
        assert launched == [app]

    def test_confirm_without_results_launches_nothing(
        self, launcher: Launcher, memory_source: MemoryKeyValueSource
    ) -> None:
        assert launcher.handle(Command.CONFIRM) is None
        assert memory_source.saves == 0

    def test_counts_are_monotonic(self, launcher: Launcher) -> None:
        for expected in (1, 2, 3):
            assert launcher.record_launch(FILES_ID).count == expected

    def test_unknown_application(self, launcher: Launcher) -> None:
        with pytest.raises(LauncherError) as exc_info:
            launcher.record_launch("/apps/missing.desktop")
        assert exc_info.value.code == ErrorCode.UNKNOWN_APPLICATION

    def test_failed_save_still_launches(
        self, sample_records: list[AppRecord], tmp_path: Path
    ) -> None:
        # A regular file where the config directory should be makes the write fail.
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = UsageStore(FileKeyValueSource(blocker / "launcher.conf"))
        launched: list[Application] = []
        launcher = Launcher.open(sample_records, store, on_launch=launched.append)
        launcher.search("fire")

        with pytest.raises(LauncherError) as exc_info:
            launcher.handle(Command.CONFIRM)

        assert exc_info.value.code == ErrorCode.STORE_WRITE_FAILED
        assert exc_info.value.recoverable is True
        assert [app.id for app in launched] == [FIREFOX_ID]
        assert launched[0].count == 1


class TestStyle:
    def test_set_style_persists_override(
        self, launcher: Launcher, memory_source: MemoryKeyValueSource
    ) -> None:
        launcher.set_style("match", "#abcdef")
        launcher.save()
        assert memory_source.style == {StyleAttribute.MATCH: "#abcdef"}

    def test_unknown_attribute(self, launcher: Launcher) -> None:
        with pytest.raises(LauncherError) as exc_info:
            launcher.set_style("shadow", "#000000")
        assert exc_info.value.code == ErrorCode.INVALID_STYLE_ATTRIBUTE


class TestView:
    def test_view_exposes_query_state_and_spans(self, launcher: Launcher) -> None:
        view = launcher.search("Fire")
        assert view.query == "Fire"
        assert view.cursor == 4
        assert view.selected == 0
        assert len(view.results) == 1
        row = view.results[0]
        assert row.selected is True
        assert row.name_match == MatchSpan(start=0, length=4)
        assert row.comment_match is None

    def test_search_replaces_previous_query(self, launcher: Launcher) -> None:
        launcher.search("fire")
        launcher.session.move_home()
        view = launcher.search("term")
        assert view.query == "term"
        assert [row.name for row in view.results] == ["Terminal"]

    def test_cancel_is_reflected(self, launcher: Launcher) -> None:
        launcher.handle(Command.CANCEL)
        assert launcher.view().closed is True
