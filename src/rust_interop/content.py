"""Library records from a directory of Markdown files with YAML front matter.

Each ``*.md`` file describes one library; only its front matter is read.
The Markdown body is ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
import yaml
from pydantic import ValidationError

from rust_interop.errors import ErrorCode, RustInteropError
from rust_interop.models.library import LibraryRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

log = structlog.get_logger()

_FENCE = "---"


def parse_frontmatter(text: str) -> dict[str, Any] | None:
    """Return the YAML mapping between the leading ``---`` fences, or None if absent."""
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != _FENCE:
        return None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FENCE:
            data = yaml.safe_load("\n".join(lines[1:i]))
            if data is None:
                return {}
            if not isinstance(data, dict):
                return None
            return data
    return None


def check_direction(
    records: Iterable[LibraryRecord], strict: bool = False
) -> list[LibraryRecord]:
    """Drop records where not exactly one of host_lang/guest_lang is Rust.

    Records missing a language are kept; they never match a partition.
    With ``strict=True`` the first violation raises instead.
    """
    kept: list[LibraryRecord] = []
    for record in records:
        if not record.is_paired:
            kept.append(record)
            continue
        if record.direction is None:
            if strict:
                raise RustInteropError(
                    ErrorCode.INVALID_RECORD,
                    f"{record.title!r}: exactly one of host_lang/guest_lang must be 'Rust' "
                    f"(got host_lang={record.host_lang!r}, guest_lang={record.guest_lang!r})",
                )
            log.warning(
                "record_direction_invalid",
                title=record.title,
                host_lang=record.host_lang,
                guest_lang=record.guest_lang,
            )
            continue
        kept.append(record)
    return kept


def load_record(path: Path) -> LibraryRecord:
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise RustInteropError(ErrorCode.INVALID_RECORD, f"{path}: unreadable file: {e}") from e
    try:
        data = parse_frontmatter(text)
    except yaml.YAMLError as e:
        raise RustInteropError(
            ErrorCode.INVALID_RECORD, f"{path}: malformed front matter: {e}"
        ) from e
    if data is None:
        raise RustInteropError(ErrorCode.INVALID_RECORD, f"{path}: no front matter found")
    try:
        return LibraryRecord.model_validate(data)
    except ValidationError as e:
        raise RustInteropError(ErrorCode.INVALID_RECORD, f"{path}: {e}") from e


def load_records(directory: str | Path, strict: bool = False) -> list[LibraryRecord]:
    """Load every ``*.md`` file under ``directory``, ordered by path."""
    root = Path(directory).expanduser()
    if not root.is_dir():
        raise RustInteropError(
            ErrorCode.CONTENT_NOT_FOUND, f"Content directory not found: {root}"
        )

    paths = sorted(root.rglob("*.md"))
    records = check_direction((load_record(p) for p in paths), strict=strict)
    log.info(
        "content_loaded",
        directory=str(root),
        files=len(paths),
        records=len(records),
    )
    return records
