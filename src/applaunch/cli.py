"""Command-line front end.

A plain-text presentation consumer over ``Launcher``; it never spawns
processes. ``launched`` records a launch that happened elsewhere.
"""

from __future__ import annotations

import argparse
import sys

from applaunch.config import Settings
from applaunch.errors import LauncherError
from applaunch.launcher import Launcher
from applaunch.loader import load_records
from applaunch.logsetup import configure_logging
from applaunch.models.application import MatchSpan
from applaunch.store import FileKeyValueSource, UsageStore


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="applaunch", description="Application launcher core")
    parser.add_argument(
        "--app-dir",
        action="append",
        default=None,
        help="Directory of .desktop files (repeatable; overrides settings)",
    )
    parser.add_argument("--config", default=None, help="Path of launcher.conf")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Rank applications against a query")
    search.add_argument("query")
    search.add_argument(
        "--limit", type=_positive_int, default=None, help="Maximum number of results"
    )

    launched = sub.add_parser("launched", help="Record a launch of APP_ID")
    launched.add_argument("app_id")

    style = sub.add_parser("style", help="Show the effective style or set one attribute")
    style.add_argument("attribute", nargs="?")
    style.add_argument("value", nargs="?")

    sub.add_parser("counts", help="Show persisted launch counts")
    return parser.parse_args(argv)


def _highlight(text: str, span: MatchSpan | None) -> str:
    if span is None:
        return text
    end = span.start + span.length
    return f"{text[: span.start]}[{text[span.start : end]}]{text[end:]}"


def build_launcher(args: argparse.Namespace, settings: Settings) -> Launcher:
    app_dirs = args.app_dir if args.app_dir else settings.loader.app_dirs
    config_path = args.config or settings.store.config_path
    store = UsageStore(FileKeyValueSource(config_path))
    limit = getattr(args, "limit", None)
    if limit is None:
        limit = settings.search.max_results
    return Launcher.open(load_records(app_dirs), store, max_results=limit)


def run(args: argparse.Namespace, settings: Settings) -> int:
    launcher = build_launcher(args, settings)

    if args.command == "search":
        view = launcher.search(args.query)
        if not view.results:
            print("No matches.")
        for position, row in enumerate(view.results, start=1):
            line = f"#{position} {row.score} {_highlight(row.name, row.name_match)}"
            if row.comment:
                line += f" - {_highlight(row.comment, row.comment_match)}"
            print(line)
    elif args.command == "launched":
        app = launcher.record_launch(args.app_id)
        print(f"{app.id}={app.count}")
    elif args.command == "style":
        if args.attribute is not None:
            if args.value is None:
                print("style: a VALUE is required when ATTRIBUTE is given", file=sys.stderr)
                return 2
            launcher.set_style(args.attribute, args.value)
            launcher.save()
        for attribute, value in launcher.style.items():
            print(f"{attribute.value}={value}")
    elif args.command == "counts":
        for app in launcher.applications:
            if app.count > 0:
                print(f"{app.id}={app.count}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings()
    configure_logging(settings.logging)
    try:
        return run(args, settings)
    except LauncherError as exc:
        print(f"error [{exc.code.value}]: {exc.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
