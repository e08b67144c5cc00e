"""Unit tests for rust_interop.content (no filesystem access)."""

from __future__ import annotations

import pytest

from rust_interop.content import check_direction, parse_frontmatter
from rust_interop.errors import ErrorCode, RustInteropError
from rust_interop.models.library import LibraryRecord


def _record(title: str, host_lang: str | None, guest_lang: str | None) -> LibraryRecord:
    return LibraryRecord(
        title=title, host_lang=host_lang, guest_lang=guest_lang, description="A library."
    )


# ---------------------------------------------------------------------------
# parse_frontmatter
# ---------------------------------------------------------------------------


class TestParseFrontmatter:
    def test_extracts_mapping(self) -> None:
        text = '---\ntitle: "PyO3"\nhost_lang: Python\nguest_lang: Rust\n---\n\nBody text.\n'
        assert parse_frontmatter(text) == {
            "title": "PyO3",
            "host_lang": "Python",
            "guest_lang": "Rust",
        }

    def test_booleans_parsed(self) -> None:
        data = parse_frontmatter("---\nrequires_nightly: true\n---\n")
        assert data == {"requires_nightly": True}

    def test_no_frontmatter(self) -> None:
        assert parse_frontmatter("# Just a heading\n") is None

    def test_unterminated_frontmatter(self) -> None:
        assert parse_frontmatter("---\ntitle: x\n") is None

    def test_empty_frontmatter(self) -> None:
        assert parse_frontmatter("---\n---\nbody") == {}

    def test_non_mapping_frontmatter(self) -> None:
        assert parse_frontmatter("---\n- a\n- b\n---\n") is None

    def test_leading_bom(self) -> None:
        assert parse_frontmatter("\ufeff---\ntitle: x\n---\n") == {"title": "x"}

    def test_empty_text(self) -> None:
        assert parse_frontmatter("") is None


# ---------------------------------------------------------------------------
# check_direction
# ---------------------------------------------------------------------------


class TestCheckDirection:
    def test_keeps_valid_records(self) -> None:
        records = [_record("a", "Rust", "Python"), _record("b", "Python", "Rust")]
        assert check_direction(records) == records

    def test_drops_neither_rust(self) -> None:
        records = [_record("a", "C", "Python"), _record("b", "Rust", "Go")]
        assert [r.title for r in check_direction(records)] == ["b"]

    def test_drops_both_rust(self) -> None:
        assert check_direction([_record("a", "Rust", "Rust")]) == []

    def test_keeps_records_missing_a_language(self) -> None:
        records = [_record("a", None, "Go")]
        assert check_direction(records) == records

    def test_strict_raises(self) -> None:
        with pytest.raises(RustInteropError) as exc_info:
            check_direction([_record("bad", "C", "Python")], strict=True)
        assert exc_info.value.code == ErrorCode.INVALID_RECORD
        assert "bad" in exc_info.value.message

    def test_strict_accepts_valid(self) -> None:
        records = [_record("a", "Rust", "Python")]
        assert check_direction(records, strict=True) == records
