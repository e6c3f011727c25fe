"""
Color IR types.

Channel values come from the upstream color engine; this module only
stores them and renders the hexadecimal form.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class RGBA(BaseModel):
    """
    A resolved color.

    Example:
        RGBA(r=0, g=102, b=204, a=0.5)
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0, le=255, description="Red channel (0-255)")
    g: float = Field(ge=0, le=255, description="Green channel (0-255)")
    b: float = Field(ge=0, le=255, description="Blue channel (0-255)")
    a: float = Field(default=1, ge=0, le=1, description="Alpha (0-1, 1 is opaque)")

    def to_hex8_string(self) -> str:
        """Format as #rrggbbaa with lowercase digits."""
        channels = (
            _round_half_up(self.r),
            _round_half_up(self.g),
            _round_half_up(self.b),
            _round_half_up(self.a * 255),
        )
        return "#" + "".join(f"{channel:02x}" for channel in channels)


class ColorSpec(BaseModel):
    """A theme color: a stable key name plus its computed value."""

    model_config = ConfigDict(frozen=True)

    key_name: str = Field(description="Identifier used in variable names")
    computed: RGBA = Field(description="Resolved color value")
