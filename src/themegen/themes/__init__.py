"""
themegen theme resolution and variable naming.

Usage:
    from themegen.core import GeneratorConfig
    from themegen.themes import (
        get_color_css_configuration,
        get_color_variable_name,
        resolve_default_theme,
    )

    # Pick the default theme (raises if the set is ambiguous)
    theme = resolve_default_theme(themes)

    # Name and reference a color
    config = GeneratorConfig(color_variable_prefix="app")
    name = get_color_variable_name(color, config)       # --app-primary
    value = get_color_css_configuration(color, config)  # rgb(var(--app-primary))
"""

from .naming import (
    get_color_variable_name,
    get_color_variant_variable_name,
    get_custom_property_variable_name,
    get_formatted_variant_scope,
    get_opacity_variant_variable_name,
    get_pascal_case,
    get_variant_scope,
)
from .resolver import get_scheme_default_theme, resolve_default_theme
from .values import (
    get_color_css_configuration,
    get_color_css_variable_value,
    get_color_variant_css_configuration,
    get_color_variant_css_variable_value,
    get_opacity_variant_css_configuration,
    get_opacity_variant_css_variable_value,
)

__all__ = [
    # Resolution
    "resolve_default_theme",
    "get_scheme_default_theme",
    # Names
    "get_variant_scope",
    "get_formatted_variant_scope",
    "get_color_variable_name",
    "get_color_variant_variable_name",
    "get_opacity_variant_variable_name",
    "get_custom_property_variable_name",
    "get_pascal_case",
    # Values
    "get_color_variant_css_configuration",
    "get_color_variant_css_variable_value",
    "get_opacity_variant_css_configuration",
    "get_opacity_variant_css_variable_value",
    "get_color_css_configuration",
    "get_color_css_variable_value",
]
