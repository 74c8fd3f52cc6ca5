"""Record source: scan application directories for desktop entries.

Each file is read line by line and the first non-empty value wins per field.
``Keywords=`` lines only count while no ``Exec=`` value has been seen yet, so
hints placed after the launch command are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from applaunch.models.application import AppRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

log = structlog.get_logger()

DESKTOP_SUFFIX = ".desktop"

# line prefix -> AppRecord field
_FIELD_PREFIXES = {
    "Name=": "name",
    "GenericName=": "generic_name",
    "Comment=": "comment",
}


def parse_desktop_entry(app_id: str, text: str) -> AppRecord:
    fields = {"name": "", "generic_name": "", "comment": "", "launch_command": ""}
    hints: list[str] = []
    for line in text.splitlines():
        for prefix, field in _FIELD_PREFIXES.items():
            if not fields[field] and line.startswith(prefix):
                fields[field] = line[len(prefix) :]
        if not fields["launch_command"] and line.startswith("Exec="):
            fields["launch_command"] = line[len("Exec=") :]
        if not fields["launch_command"] and line.startswith("Keywords="):
            hints.append(line[len("Keywords=") :])
    return AppRecord(
        id=app_id,
        keyword_hints=" ".join(hints) if hints else None,
        **fields,
    )


def load_desktop_entry(path: Path) -> AppRecord | None:
    """Parse one file. Returns ``None`` (and logs) when it cannot be read."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        log.warning("desktop_entry_read_error", path=str(path), exc_info=True)
        return None
    return parse_desktop_entry(str(path), text)


def iter_records(app_dirs: Iterable[str | Path]) -> Iterator[AppRecord]:
    for app_dir in app_dirs:
        directory = Path(app_dir).expanduser()
        if not directory.is_dir():
            log.debug("app_dir_missing", path=str(directory))
            continue
        for path in sorted(directory.iterdir()):
            if path.suffix != DESKTOP_SUFFIX or not path.is_file():
                continue
            record = load_desktop_entry(path)
            if record is not None:
                yield record


def load_records(app_dirs: Iterable[str | Path]) -> list[AppRecord]:
    records = list(iter_records(app_dirs))
    log.info("records_loaded", count=len(records))
    return records
