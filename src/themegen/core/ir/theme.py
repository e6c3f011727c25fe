"""
Theme IR types.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ThemeScheme(StrEnum):
    """Color scheme a theme applies to. Themes without one are unscoped."""

    DARK = "dark"
    LIGHT = "light"


class ThemeSpec(BaseModel):
    """
    A named collection of color and variant assignments.

    Example:
        ThemeSpec(name="midnight", default=True, scheme=ThemeScheme.DARK)
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Theme name")
    default: bool = Field(default=False, description="Whether this is a default theme")
    scheme: ThemeScheme | None = Field(
        default=None, description="Dark, light, or None for unscoped"
    )

    def is_default(self) -> bool:
        return self.default

    def has_name(self) -> bool:
        return bool(self.name)

    def has_scheme(self) -> bool:
        return self.scheme is not None

    def get_scheme(self) -> ThemeScheme | None:
        return self.scheme
