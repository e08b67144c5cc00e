from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RotationEntry(BaseModel):
    """One "<guest> in <host>" highlight shown by the rotating header."""

    model_config = ConfigDict(frozen=True)

    label: str
    anchor: str  # Fragment id of the matching subsection heading, without "#"
