"""
themegen Intermediate Representation (IR) types.

Immutable models for themes, colors, variants and custom properties.
They are populated upstream and only read by the naming layer.
"""

from .color import RGBA, ColorSpec
from .custom_property import CustomPropertySpec
from .theme import ThemeScheme, ThemeSpec
from .variant import AnyVariant, ColorVariantSpec, OpacityVariantSpec, VariantSpec

__all__ = [
    # Themes
    "ThemeScheme",
    "ThemeSpec",
    # Colors
    "RGBA",
    "ColorSpec",
    # Variants
    "VariantSpec",
    "ColorVariantSpec",
    "OpacityVariantSpec",
    "AnyVariant",
    # Custom properties
    "CustomPropertySpec",
]
