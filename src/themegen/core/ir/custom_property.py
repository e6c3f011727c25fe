"""
Custom property IR types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CustomPropertySpec(BaseModel):
    """
    A user-declared CSS custom property not tied to the color model.

    Example:
        CustomPropertySpec(name="borderRadius", prefix="app-")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Property name, usually camelCase")
    prefix: str | None = Field(
        default=None, description="Prepended verbatim to the variable name"
    )

    def get_name(self) -> str:
        return self.name

    def get_prefix(self) -> str:
        return self.prefix or ""
