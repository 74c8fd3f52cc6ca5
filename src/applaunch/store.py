"""Usage & preference store.

Launch counts and style overrides live in one small ``key=value`` file:

    [Style]
    highlight=#ff0000

    [Application Launch Counts]
    /usr/share/applications/firefox.desktop=5

Reading never fails: a missing or unreadable file, section headers, unknown
keys and malformed counts all degrade to defaults. Writing always replaces the
whole file and only carries non-default style entries and positive counts.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import structlog

from applaunch.errors import ErrorCode, LauncherError
from applaunch.models.style import DEFAULT_STYLE, StyleAttribute, default_style

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from applaunch.models.application import Application

log = structlog.get_logger()

StyleMap = dict[StyleAttribute, str]
CountMap = dict[str, int]

STYLE_SECTION = "[Style]"
COUNTS_SECTION = "[Application Launch Counts]"
# Application ids are file paths; "/" is always accepted so files written on
# POSIX still load elsewhere.
_PATH_SEPARATORS = tuple(sep for sep in ("/", os.sep, os.altsep) if sep)


def _parse_count(value: str) -> int | None:
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_config(text: str) -> tuple[StyleMap, CountMap]:
    """Parse persisted records into ``(style_overrides, counts)``.

    Each line is split on its last ``=``. Keys containing a path separator are
    launch counts keyed by application id; anything else must name a
    ``StyleAttribute`` or is dropped.
    """
    style: StyleMap = {}
    counts: CountMap = {}
    for line in text.splitlines():
        key, sep, value = line.rpartition("=")
        if not sep:
            continue
        if any(separator in key for separator in _PATH_SEPARATORS):
            count = _parse_count(value)
            if count is None:
                log.debug("store_count_invalid", key=key, value=value)
                continue
            counts[key] = count
            continue
        try:
            style[StyleAttribute(key)] = value
        except ValueError:
            log.debug("store_key_ignored", key=key)
    return style, counts


def render_config(style: Mapping[StyleAttribute, str], counts: Mapping[str, int]) -> str:
    lines = [STYLE_SECTION]
    lines += [f"{attribute.value}={value}" for attribute, value in style.items()]
    lines += ["", COUNTS_SECTION]
    lines += [f"{app_id}={count}" for app_id, count in counts.items()]
    return "\n".join(lines) + "\n"


class KeyValueSource(Protocol):
    """Persisted key/value mapping backing the usage store."""

    def load(self) -> tuple[StyleMap, CountMap]: ...

    def save(self, style: Mapping[StyleAttribute, str], counts: Mapping[str, int]) -> None: ...


class FileKeyValueSource:
    """``launcher.conf`` on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> tuple[StyleMap, CountMap]:
        """Read the file. Returns empty maps when missing or unreadable."""
        if not self.path.exists():
            log.debug("store_load_missing", path=str(self.path))
            return {}, {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            log.warning("store_read_error", path=str(self.path), exc_info=True)
            return {}, {}
        return parse_config(text)

    def save(self, style: Mapping[StyleAttribute, str], counts: Mapping[str, int]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(render_config(style, counts), encoding="utf-8")
        except OSError as exc:
            raise LauncherError(
                ErrorCode.STORE_WRITE_FAILED,
                f"Could not write {self.path}: {exc}",
                recoverable=True,
            ) from exc
        log.debug("store_saved", path=str(self.path), styles=len(style), counts=len(counts))


class MemoryKeyValueSource:
    """In-process source; keeps the last saved maps."""

    def __init__(
        self,
        style: Mapping[StyleAttribute, str] | None = None,
        counts: Mapping[str, int] | None = None,
    ) -> None:
        self.style: StyleMap = dict(style or {})
        self.counts: CountMap = dict(counts or {})
        self.saves = 0

    def load(self) -> tuple[StyleMap, CountMap]:
        return dict(self.style), dict(self.counts)

    def save(self, style: Mapping[StyleAttribute, str], counts: Mapping[str, int]) -> None:
        self.style = dict(style)
        self.counts = dict(counts)
        self.saves += 1


class UsageStore:
    def __init__(self, source: KeyValueSource) -> None:
        self._source = source

    def load(self) -> tuple[StyleMap, CountMap]:
        """Return the full style map (defaults applied) and the launch counts."""
        overrides, counts = self._source.load()
        style = default_style()
        style.update(overrides)
        return style, counts

    def save(
        self, applications: Iterable[Application], style: Mapping[StyleAttribute, str]
    ) -> None:
        overrides = {
            attribute: value
            for attribute, value in style.items()
            if value != DEFAULT_STYLE[attribute]
        }
        counts = {app.id: app.count for app in applications if app.count > 0}
        self._source.save(overrides, counts)

    @staticmethod
    def apply_counts(applications: Iterable[Application], counts: Mapping[str, int]) -> None:
        """Seed ``Application.count``; ids absent from ``counts`` keep their value."""
        for app in applications:
            if app.id in counts:
                app.count = counts[app.id]
