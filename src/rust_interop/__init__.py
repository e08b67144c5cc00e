"""Catalog of Rust interop libraries grouped by foreign language."""

from __future__ import annotations

from rust_interop.index import (
    LanguageIndex,
    LanguageSection,
    Subsection,
    build_index,
    build_languages,
    guest_partition,
    host_partition,
)
from rust_interop.rotation import RotationScheduler, RotationTimer
from rust_interop.slugs import host_in_rust_anchor, language_anchor, rust_in_host_anchor, slugify

__all__ = [
    # index
    "build_languages",
    "guest_partition",
    "host_partition",
    "build_index",
    "LanguageIndex",
    "LanguageSection",
    "Subsection",
    # slugs
    "slugify",
    "language_anchor",
    "host_in_rust_anchor",
    "rust_in_host_anchor",
    # rotation
    "RotationScheduler",
    "RotationTimer",
]
