from __future__ import annotations

from rust_interop.models.library import Direction, LibraryRecord
from rust_interop.models.rotation import RotationEntry

__all__ = [
    # library
    "Direction",
    "LibraryRecord",
    # rotation
    "RotationEntry",
]
