"""Anchor slugs for in-page navigation.

Heading ids and the links pointing at them are both built from these
functions; any other normalization would break existing ``#fragment`` links.
"""

from __future__ import annotations


def slugify(text: str) -> str:
    """Lower-case ``text`` and replace each space with a hyphen. Nothing else."""
    return text.lower().replace(" ", "-")


def language_anchor(lang: str) -> str:
    return slugify(lang)


def host_in_rust_anchor(lang: str) -> str:
    """Anchor of the "<lang> in Rust" subsection."""
    return f"{slugify(lang)}-in-rust"


def rust_in_host_anchor(lang: str) -> str:
    """Anchor of the "Rust in <lang>" subsection."""
    return f"rust-in-{slugify(lang)}"
