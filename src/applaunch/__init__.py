"""Application launcher core: indexing, ranking, query editing and usage tracking."""

from __future__ import annotations

from applaunch.errors import ErrorCode, LauncherError
from applaunch.indexer import build_keywords, index_records
from applaunch.launcher import Launcher
from applaunch.ranking import rank
from applaunch.session import LauncherSession
from applaunch.store import FileKeyValueSource, MemoryKeyValueSource, UsageStore

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "LauncherError",
    "build_keywords",
    "index_records",
    "rank",
    "LauncherSession",
    "Launcher",
    "UsageStore",
    "FileKeyValueSource",
    "MemoryKeyValueSource",
]
