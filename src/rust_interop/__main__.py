"""Command-line entry point.

    python -m rust_interop [index]          print the navigation index as JSON
    python -m rust_interop rotate -n 5      print successive rotation entries
    python -m rust_interop rotate --live    same, paced by rotation.interval_ms
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from rust_interop.config import Settings
from rust_interop.content import load_records
from rust_interop.errors import ErrorCode, RustInteropError
from rust_interop.index import build_index
from rust_interop.logging_setup import configure_logging
from rust_interop.rotation import RotationScheduler, RotationTimer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rust_interop.config import RotationSettings
    from rust_interop.index import LanguageIndex
    from rust_interop.models.rotation import RotationEntry

log = structlog.get_logger()


def index_to_dict(index: LanguageIndex, settings: Settings) -> dict[str, Any]:
    crates_base = settings.links.crates_base_url
    badge_base = settings.links.badge_base_url
    return {
        "languages": [
            {
                "name": section.name,
                "anchor": section.anchor,
                "subsections": [
                    {
                        "heading": sub.heading,
                        "anchor": sub.anchor,
                        "libraries": [
                            {
                                "title": r.title,
                                "description": r.description,
                                "url": r.main_url(crates_base),
                                "repo": r.repo,
                                "crates_url": r.crates_url(crates_base),
                                "badge_url": r.badge_url(badge_base),
                                "requires_nightly": r.requires_nightly,
                            }
                            for r in sub.records
                        ],
                    }
                    for sub in section.subsections
                ],
            }
            for section in index.sections
        ]
    }


def _print_entry(entry: RotationEntry) -> None:
    print(f"{entry.label}\t#{entry.anchor}", flush=True)


async def rotate_live(
    scheduler: RotationScheduler, settings: RotationSettings, count: int
) -> None:
    """Print the current entry, then one entry per timer tick until ``count`` are shown."""
    shown = 0
    done = asyncio.Event()

    def show(entry: RotationEntry) -> None:
        nonlocal shown
        if shown >= count:
            return
        _print_entry(entry)
        shown += 1
        if shown >= count:
            done.set()

    show(scheduler.current_entry())
    if done.is_set() or count <= 0:
        return
    async with RotationTimer.from_settings(scheduler, settings, on_tick=show):
        await done.wait()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rust-interop")
    parser.add_argument("--content", help="Directory of library Markdown files")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on records where neither or both languages are Rust",
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("index", help="Print the navigation index as JSON (default)")
    rotate = sub.add_parser("rotate", help="Print successive rotation entries")
    rotate.add_argument("-n", "--count", type=int, default=1)
    rotate.add_argument(
        "--live",
        action="store_true",
        help="Advance on the configured timer interval instead of immediately",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        err = RustInteropError(ErrorCode.INVALID_CONFIG, str(e))
        print(json.dumps(err.to_dict()), file=sys.stderr)
        return 1
    configure_logging(settings.logging)

    directory = args.content or settings.content.directory
    strict = settings.content.strict if args.strict is None else args.strict

    try:
        records = load_records(directory, strict=strict)
        if args.command == "rotate" and args.live:
            asyncio.run(rotate_live(RotationScheduler(records), settings.rotation, args.count))
        elif args.command == "rotate":
            scheduler = RotationScheduler(records)
            for _ in range(args.count):
                _print_entry(scheduler.current_entry())
                scheduler.tick()
        else:
            index = build_index(records)
            print(json.dumps(index_to_dict(index, settings), indent=2))
    except RustInteropError as e:
        log.error("command_failed", code=e.code.value, message=e.message)
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
