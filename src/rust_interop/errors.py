"""Error types shared across the package.

Every failure the package reports deliberately is a ``RustInteropError``
carrying a machine-readable ``ErrorCode``. Missing optional record fields are
not errors and never reach this module.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    EMPTY_ROTATION = "EMPTY_ROTATION"
    INVALID_RECORD = "INVALID_RECORD"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"
    INVALID_CONFIG = "INVALID_CONFIG"


class RustInteropError(Exception):
    """Precondition or content failure with a stable error code."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
