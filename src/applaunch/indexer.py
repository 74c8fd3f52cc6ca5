"""Keyword indexer: raw application records to weighted searchable tokens.

Keyword order matters to ranking (earlier keywords score higher), so the
list is built as: keyword hints, then name tokens, then generic-name and
comment tokens. Duplicates are kept at every position they occur.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from applaunch.models.application import (
    DESCRIPTION_WEIGHT,
    NAME_WEIGHT,
    Application,
    Keyword,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from applaunch.models.application import AppRecord


def tokenize(text: str) -> list[str]:
    """Lower-case and split on single spaces, dropping empty tokens."""
    return [word for word in text.lower().split(" ") if word]


def build_keywords(record: AppRecord) -> list[Keyword]:
    keywords: list[Keyword] = []
    if record.keyword_hints:
        keywords.extend(
            Keyword(word=w, weight=DESCRIPTION_WEIGHT) for w in tokenize(record.keyword_hints)
        )
    keywords.extend(Keyword(word=w, weight=NAME_WEIGHT) for w in tokenize(record.name))
    description = f"{record.generic_name} {record.comment}"
    keywords.extend(Keyword(word=w, weight=DESCRIPTION_WEIGHT) for w in tokenize(description))
    return keywords


def index_record(record: AppRecord) -> Application:
    return Application(
        id=record.id,
        name=record.name,
        generic_name=record.generic_name,
        comment=record.comment,
        launch_command=record.launch_command,
        keywords=build_keywords(record),
    )


def index_records(records: Iterable[AppRecord]) -> list[Application]:
    """Index every record once. The returned list is held for the process lifetime."""
    return [index_record(record) for record in records]
