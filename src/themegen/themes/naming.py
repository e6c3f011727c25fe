"""
CSS custom-property names for colors, variants and custom properties.

All names start with `--` and are built from hyphen-joined tokens:

    --{prefix-}{key_name}                 colors
    --color-variant-{scope-}{name}        color variants
    --opacity-variant-{scope-}{name}      opacity variants
    --{prefix}{pascal-case(name)}         custom properties
"""

from __future__ import annotations

import re

from themegen.core.config import GeneratorConfig
from themegen.core.ir import (
    ColorSpec,
    ColorVariantSpec,
    CustomPropertySpec,
    OpacityVariantSpec,
    VariantSpec,
)

# Acronym run before a capitalized word, lowercase word, lone capital, digits
_WORD_PATTERN = re.compile(
    r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+",
    re.ASCII,
)


def get_color_variable_name(color: ColorSpec, config: GeneratorConfig) -> str:
    """Get the name of the CSS variable for a color."""
    parts = [config.color_variable_prefix, color.key_name]
    return "--" + "-".join(part for part in parts if part)


def get_variant_scope(variant: VariantSpec) -> str | None:
    """
    Get the name of the color a variant is restricted to.

    Only variants that list exactly one color are scoped.
    """
    return variant.colors[0] if len(variant.colors) == 1 else None


def get_formatted_variant_scope(variant: VariantSpec) -> str:
    """Get the variant scope followed by a hyphen, or an empty string."""
    scope = get_variant_scope(variant)
    return f"{scope}-" if scope else ""


def get_color_variant_variable_name(variant: ColorVariantSpec) -> str:
    """Get the name of the CSS variable for a color variant."""
    return f"--color-variant-{get_formatted_variant_scope(variant)}{variant.name}"


def get_opacity_variant_variable_name(variant: OpacityVariantSpec) -> str:
    """Get the name of the CSS variable for an opacity variant."""
    return f"--opacity-variant-{get_formatted_variant_scope(variant)}{variant.name}"


def get_custom_property_variable_name(prop: CustomPropertySpec) -> str:
    """Get the name of the CSS variable for a custom property."""
    return f"--{prop.get_prefix()}{get_pascal_case(prop.get_name())}"


def get_pascal_case(text: str) -> str:
    """
    Split an identifier into lowercase hyphen-joined words.

    Examples:
        backgroundColor -> background-color
        HTTPServer      -> http-server
        heading2Size    -> heading2-size
    """
    if not text:
        return ""
    return "-".join(word.lower() for word in _WORD_PATTERN.findall(text))
