"""
themegen - CSS custom-property naming for color themes.

Resolves the default theme out of a set of theme definitions and derives
deterministic CSS variable names and values for colors, color variants,
opacity variants and custom properties.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.config import GeneratorConfig, load_config
from .core.errors import (
    ConfigError,
    MissingNameError,
    MultipleDefaultThemesError,
    MultipleScopedDefaultThemesError,
    NoDefaultThemeError,
    ThemegenError,
    ThemeResolutionError,
)


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("themegen")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    # Configuration
    "GeneratorConfig",
    "load_config",
    # Errors
    "ThemegenError",
    "ThemeResolutionError",
    "MissingNameError",
    "NoDefaultThemeError",
    "MultipleDefaultThemesError",
    "MultipleScopedDefaultThemesError",
    "ConfigError",
]
