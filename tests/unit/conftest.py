"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

import pytest

from applaunch.indexer import index_records
from applaunch.models.application import Application, AppRecord
from applaunch.session import LauncherSession
from applaunch.store import MemoryKeyValueSource, UsageStore

FIREFOX_ID = "/apps/firefox.desktop"
FILES_ID = "/apps/files.desktop"
TERMINAL_ID = "/apps/terminal.desktop"
FONT_VIEWER_ID = "/apps/fontviewer.desktop"


@pytest.fixture()
def sample_records() -> list[AppRecord]:
    return [
        AppRecord(
            id=FIREFOX_ID,
            name="Firefox",
            generic_name="Web Browser",
            comment="Browse the World Wide Web",
            launch_command="firefox %u",
            keyword_hints="internet www",
        ),
        AppRecord(
            id=FILES_ID,
            name="Files",
            generic_name="File Manager",
            comment="Access and organize files",
            launch_command="nautilus --new-window %U",
        ),
        AppRecord(
            id=TERMINAL_ID,
            name="Terminal",
            generic_name="Terminal Emulator",
            comment="Use the command line",
            launch_command="gnome-terminal",
            keyword_hints="shell prompt command cli",
        ),
        AppRecord(
            id=FONT_VIEWER_ID,
            name="Font Viewer",
            comment="View fonts on your system",
            launch_command="gnome-font-viewer %u",
        ),
    ]


@pytest.fixture()
def applications(sample_records: list[AppRecord]) -> list[Application]:
    return index_records(sample_records)


@pytest.fixture()
def session(applications: list[Application]) -> LauncherSession:
    return LauncherSession(applications)


@pytest.fixture()
def memory_source() -> MemoryKeyValueSource:
    return MemoryKeyValueSource()


@pytest.fixture()
def usage_store(memory_source: MemoryKeyValueSource) -> UsageStore:
    return UsageStore(memory_source)
