"""Language index: distinct foreign languages and per-language partitions.

Everything here is a pure function of the record collection and is rebuilt
from scratch on each call; the collection is static for a process lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from rust_interop.models.library import RUST
from rust_interop.slugs import host_in_rust_anchor, language_anchor, rust_in_host_anchor

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from rust_interop.models.library import LibraryRecord

log = structlog.get_logger()


def build_languages(records: Iterable[LibraryRecord]) -> list[str]:
    """Return every non-Rust host/guest language, deduplicated and sorted.

    A half-populated record still contributes the language it names; it only
    stays out of the partitions.
    """
    langs: set[str] = set()
    for record in records:
        for lang in (record.host_lang, record.guest_lang):
            if lang is not None and lang != RUST:
                langs.add(lang)
    return sorted(langs)


def guest_partition(records: Iterable[LibraryRecord], lang: str) -> list[LibraryRecord]:
    """Records embedding ``lang`` as a guest into Rust ("<lang> in Rust")."""
    return [r for r in records if r.is_paired and r.guest_lang == lang]


def host_partition(records: Iterable[LibraryRecord], lang: str) -> list[LibraryRecord]:
    """Records embedding Rust as a guest into ``lang`` ("Rust in <lang>")."""
    return [r for r in records if r.is_paired and r.host_lang == lang]


@dataclass(frozen=True)
class Subsection:
    heading: str
    anchor: str
    records: list[LibraryRecord]


@dataclass(frozen=True)
class LanguageSection:
    name: str
    anchor: str
    # Guest subsection first, then host; empty partitions are left out.
    subsections: list[Subsection] = field(default_factory=list)


@dataclass
class LanguageIndex:
    """Navigation index handed to the rendering layer."""

    sections: list[LanguageSection] = field(default_factory=list)

    @property
    def languages(self) -> list[str]:
        return [s.name for s in self.sections]

    def section(self, lang: str) -> LanguageSection | None:
        for s in self.sections:
            if s.name == lang:
                return s
        return None

    def anchors(self) -> list[str]:
        """All anchors in page order: each language followed by its subsections."""
        result: list[str] = []
        for s in self.sections:
            result.append(s.anchor)
            result.extend(sub.anchor for sub in s.subsections)
        return result


def build_index(records: Sequence[LibraryRecord]) -> LanguageIndex:
    """Build the full navigation index in a single pass over the languages."""
    sections: list[LanguageSection] = []
    for lang in build_languages(records):
        subsections: list[Subsection] = []

        guests = guest_partition(records, lang)
        if guests:
            subsections.append(
                Subsection(
                    heading=f"{lang} in {RUST}",
                    anchor=host_in_rust_anchor(lang),
                    records=guests,
                )
            )

        hosts = host_partition(records, lang)
        if hosts:
            subsections.append(
                Subsection(
                    heading=f"{RUST} in {lang}",
                    anchor=rust_in_host_anchor(lang),
                    records=hosts,
                )
            )

        sections.append(
            LanguageSection(name=lang, anchor=language_anchor(lang), subsections=subsections)
        )

    log.debug("index_built", languages=len(sections), records=len(records))
    return LanguageIndex(sections=sections)
