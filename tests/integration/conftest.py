"""Integration test fixtures.

Provides a content directory of real Markdown files under ``tmp_path`` and a
subprocess environment isolated from the developer's own configuration.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

_LIBRARIES = {
    "pyo3.md": """\
---
title: "PyO3"
repo: "https://github.com/PyO3/pyo3"
crate: "pyo3"
host_lang: "Python"
guest_lang: "Rust"
description: "Rust bindings for the Python interpreter"
---
""",
    "inline-python.md": """\
---
title: "inline-python"
repo: "https://github.com/fusion-engineering/inline-python"
crate: "inline-python"
host_lang: "Rust"
guest_lang: "Python"
requires_nightly: true
description: "Inline Python code directly in your Rust code"
---

Longer notes in the body are ignored.
""",
    "neon.md": """\
---
title: "Neon"
url: "https://neon-bindings.com"
repo: "https://github.com/neon-bindings/neon"
crate: "neon"
host_lang: "JavaScript"
guest_lang: "Rust"
description: "Rust bindings for writing safe and fast native Node.js modules"
---
""",
    "objc/objrs.md": """\
---
title: "objrs"
repo: "https://gitlab.com/objrs/objrs"
host_lang: "Rust"
guest_lang: "Objective C"
description: "Objective-C interop for Rust"
---
""",
}


@pytest.fixture()
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "content"
    directory.mkdir()
    for name, text in _LIBRARIES.items():
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return directory


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment for ``python -m rust_interop`` without inherited settings."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("RUST_INTEROP__")}
    env["XDG_CONFIG_HOME"] = str(tmp_path / "config")
    env["RUST_INTEROP__LOGGING__LEVEL"] = "WARNING"
    return env
