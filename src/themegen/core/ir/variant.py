"""
Variant IR types.

Color and opacity variants share the `VariantSpec` capability: a name and
the ordered list of color names the variant is scoped to. The `kind` field
tags each concrete variant so mixed lists validate into the right model.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .color import RGBA


class VariantSpec(BaseModel):
    """Shared variant fields."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Variant name (e.g., 'hover')")
    colors: list[str] = Field(
        default_factory=list, description="Names of the colors this variant applies to"
    )


class ColorVariantSpec(VariantSpec):
    """
    An alternate rendering of a base color, carrying its own resolved color.

    Example:
        ColorVariantSpec(name="hover", colors=["primary"], color=RGBA(r=0, g=82, b=163))
    """

    kind: Literal["color"] = "color"
    color: RGBA = Field(description="Resolved variant color")


class OpacityVariantSpec(VariantSpec):
    """
    A named alpha level, combined with a separate base color at use-site.

    Example:
        OpacityVariantSpec(name="muted", opacity=0.6)
    """

    kind: Literal["opacity"] = "opacity"
    opacity: float = Field(default=1, ge=0, le=1, description="Alpha level (0-1)")


AnyVariant = Annotated[ColorVariantSpec | OpacityVariantSpec, Field(discriminator="kind")]
