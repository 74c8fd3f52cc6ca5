from __future__ import annotations

from applaunch.models.application import (
    DESCRIPTION_WEIGHT,
    NAME_WEIGHT,
    Application,
    AppRecord,
    Keyword,
    MatchSpan,
    Result,
    ResultView,
)
from applaunch.models.session import Command, LauncherView, QueryState
from applaunch.models.style import DEFAULT_STYLE, StyleAttribute, default_style

__all__ = [
    # application
    "NAME_WEIGHT",
    "DESCRIPTION_WEIGHT",
    "Keyword",
    "AppRecord",
    "Application",
    "Result",
    "MatchSpan",
    "ResultView",
    # session
    "Command",
    "QueryState",
    "LauncherView",
    # style
    "StyleAttribute",
    "DEFAULT_STYLE",
    "default_style",
]
