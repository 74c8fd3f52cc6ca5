"""Ranking engine.

Each application is scored by the *first* keyword that contains the query,
never the best one:

    score = (100 - position) * weight * (10000 if prefix else 100) + count

Position rewards keywords declared early, weight rewards name tokens over
descriptions, and the prefix factor makes prefix matches dominate. The launch
count only nudges otherwise close scores. Scores <= 0 are not results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from applaunch.models.application import MatchSpan, Result, ResultView

if TYPE_CHECKING:
    from collections.abc import Sequence

    from applaunch.models.application import Application

MAX_RESULTS = 10
_POSITION_BASE = 100
_PREFIX_FACTOR = 10000
_SUBSTRING_FACTOR = 100


def score_application(query: str, app: Application) -> int:
    """Score ``app`` against an already lower-cased ``query``; 0 means no match."""
    for position, keyword in enumerate(app.keywords):
        match_index = keyword.word.find(query)
        if match_index == -1:
            continue
        factor = _PREFIX_FACTOR if match_index == 0 else _SUBSTRING_FACTOR
        score = (_POSITION_BASE - position) * keyword.weight * factor + app.count
        return max(score, 0)
    return 0


def rank(
    query: str, applications: Sequence[Application], *, limit: int = MAX_RESULTS
) -> list[Result]:
    query = query.lower()
    if not query:
        return []
    results: list[Result] = []
    for index, app in enumerate(applications):
        score = score_application(query, app)
        if score > 0:
            results.append(Result(index=index, score=score))
    results.sort(key=lambda r: r.score, reverse=True)
    return results[:limit]


def match_span(text: str, query: str) -> MatchSpan | None:
    """First case-insensitive occurrence of ``query`` in ``text``, for highlighting."""
    if not query:
        return None
    start = text.lower().find(query.lower())
    if start == -1:
        return None
    return MatchSpan(start=start, length=len(query))


def describe(
    results: Sequence[Result],
    applications: Sequence[Application],
    query: str,
    selected: int = 0,
) -> list[ResultView]:
    views: list[ResultView] = []
    for row, result in enumerate(results):
        app = result.application(applications)
        views.append(
            ResultView(
                id=app.id,
                name=app.name,
                comment=app.comment,
                score=result.score,
                selected=row == selected,
                name_match=match_span(app.name, query),
                comment_match=match_span(app.comment, query),
            )
        )
    return views
