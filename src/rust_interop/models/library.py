from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

RUST = "Rust"

DEFAULT_CRATES_BASE_URL = "https://crates.io/crates"
DEFAULT_BADGE_BASE_URL = "http://meritbadge.herokuapp.com"


class Direction(StrEnum):
    GUEST = "guest"  # "<lang> in Rust"
    HOST = "host"  # "Rust in <lang>"


class LibraryRecord(BaseModel):
    """Front matter of a single catalogued interop library."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    host_lang: str | None = None
    guest_lang: str | None = None
    description: str
    repo: str | None = None
    url: str | None = None
    crate: str | None = None
    requires_nightly: bool = False

    @property
    def is_paired(self) -> bool:
        return self.host_lang is not None and self.guest_lang is not None

    @property
    def direction(self) -> Direction | None:
        """Side of the pair holding the foreign language; None unless exactly one side is Rust."""
        if not self.is_paired:
            return None
        if self.host_lang == RUST and self.guest_lang != RUST:
            return Direction.GUEST
        if self.guest_lang == RUST and self.host_lang != RUST:
            return Direction.HOST
        return None

    @property
    def pair_label(self) -> str | None:
        if not self.is_paired:
            return None
        return f"{self.guest_lang} in {self.host_lang}"

    def crates_url(self, base_url: str = DEFAULT_CRATES_BASE_URL) -> str | None:
        if not self.crate:
            return None
        return f"{base_url.rstrip('/')}/{self.crate}"

    def badge_url(self, base_url: str = DEFAULT_BADGE_BASE_URL) -> str | None:
        if not self.crate:
            return None
        return f"{base_url.rstrip('/')}/{self.crate}"

    def main_url(self, crates_base_url: str = DEFAULT_CRATES_BASE_URL) -> str | None:
        """Primary link for the record: url, then repo, then the crates.io page."""
        # Empty strings fall through like missing values.
        return self.url or self.repo or self.crates_url(crates_base_url)
