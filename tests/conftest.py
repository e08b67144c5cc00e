"""Shared fixtures: a small catalog covering both directions."""

from __future__ import annotations

import pytest

from rust_interop.models.library import LibraryRecord


def _record(**overrides: object) -> LibraryRecord:
    fields: dict[str, object] = {
        "title": "lib",
        "host_lang": "Rust",
        "guest_lang": "Python",
        "description": "A library.",
    }
    fields.update(overrides)
    return LibraryRecord.model_validate(fields)


@pytest.fixture()
def sample_records() -> list[LibraryRecord]:
    return [
        _record(
            title="PyO3",
            host_lang="Python",
            guest_lang="Rust",
            repo="https://github.com/PyO3/pyo3",
            crate="pyo3",
        ),
        _record(
            title="inline-python",
            host_lang="Rust",
            guest_lang="Python",
            repo="https://github.com/fusion-engineering/inline-python",
            crate="inline-python",
            requires_nightly=True,
        ),
        _record(
            title="Neon",
            host_lang="JavaScript",
            guest_lang="Rust",
            url="https://neon-bindings.com",
            repo="https://github.com/neon-bindings/neon",
            crate="neon",
        ),
        _record(
            title="cxx",
            host_lang="Rust",
            guest_lang="C++",
            repo="https://github.com/dtolnay/cxx",
            crate="cxx",
        ),
        _record(
            title="objrs",
            host_lang="Rust",
            guest_lang="Objective C",
            repo="https://gitlab.com/objrs/objrs",
        ),
        _record(
            title="rust-cpython",
            host_lang="Python",
            guest_lang="Rust",
            repo="https://github.com/dgrunwald/rust-cpython",
            crate="cpython",
        ),
    ]
