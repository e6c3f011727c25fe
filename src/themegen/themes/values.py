"""
CSS values for color and variant custom properties.

Two encodings are supported, selected by `GeneratorConfig.hexadecimal`:

- channel lists: the variable holds `r,g,b` (or `r,g,b,a`) and references
  wrap it as `rgb(var(...))` / `rgba(var(...))`
- hexadecimal: the variable holds `#rrggbbaa` and references are a bare
  `var(...)`

Colors keep alpha out of the stored value and append it when referenced.
Color variants store alpha inside the value. Opacity variants are always
combined with a base color through `rgba()`.
"""

from __future__ import annotations

from decimal import Decimal

from themegen.core.config import GeneratorConfig
from themegen.core.ir import RGBA, ColorSpec, ColorVariantSpec, OpacityVariantSpec

from .naming import (
    get_color_variable_name,
    get_color_variant_variable_name,
    get_opacity_variant_variable_name,
)


def _format_number(value: float) -> str:
    """
    Render a number the way browsers and JavaScript print it.

    255.0 -> `255`, 0.5 -> `0.5`, 0.00005 -> `0.00005`, 1e-07 -> `1e-7`.
    Exponent notation is only used below 1e-6 or from 1e21 up.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _channels(color: RGBA, *, with_alpha: bool) -> str:
    channels = [color.r, color.g, color.b]
    if with_alpha:
        channels.append(color.a)
    return ",".join(_format_number(channel) for channel in channels)


def get_color_variant_css_configuration(
    variant: ColorVariantSpec, config: GeneratorConfig
) -> str:
    """Get the CSS value that references a color variant's variable."""
    variable = f"var({get_color_variant_variable_name(variant)})"

    if config.hexadecimal:
        return variable
    elif variant.color.a != 1:
        return f"rgba({variable})"
    else:
        return f"rgb({variable})"


def get_color_variant_css_variable_value(
    variant: ColorVariantSpec, config: GeneratorConfig
) -> str:
    """Get the value stored in a color variant's variable."""
    if config.hexadecimal:
        return variant.color.to_hex8_string()
    return _channels(variant.color, with_alpha=variant.color.a != 1)


def get_opacity_variant_css_configuration(
    color: ColorSpec, variant: OpacityVariantSpec, config: GeneratorConfig
) -> str:
    """
    Get the CSS value applying an opacity variant to a color.

    Never hex-encoded: the opacity variable holds a scalar alpha that only
    makes sense next to a channel list.
    """
    color_variable = get_color_variable_name(color, config)
    opacity_variable = get_opacity_variant_variable_name(variant)
    return f"rgba(var({color_variable}), var({opacity_variable}))"


def get_opacity_variant_css_variable_value(variant: OpacityVariantSpec) -> str:
    """Get the alpha value stored in an opacity variant's variable."""
    return _format_number(variant.opacity)


def get_color_css_configuration(color: ColorSpec, config: GeneratorConfig) -> str:
    """Get the CSS value that references a color's variable."""
    variable = f"var({get_color_variable_name(color, config)})"

    if config.hexadecimal:
        return variable
    elif color.computed.a != 1:
        return f"rgba({variable}, {_format_number(color.computed.a)})"
    else:
        return f"rgb({variable})"


def get_color_css_variable_value(color: ColorSpec, config: GeneratorConfig) -> str:
    """Get the value stored in a color's variable. Alpha is never included."""
    if config.hexadecimal:
        return color.computed.to_hex8_string()
    return _channels(color.computed, with_alpha=False)
