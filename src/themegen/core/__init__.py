"""Core themegen functionality: IR types, configuration and errors."""

from . import ir
from .config import GeneratorConfig, find_config, load_config
from .errors import (
    ConfigError,
    MissingNameError,
    MultipleDefaultThemesError,
    MultipleScopedDefaultThemesError,
    NoDefaultThemeError,
    ThemegenError,
    ThemeResolutionError,
)

__all__ = [
    "ir",
    "GeneratorConfig",
    "find_config",
    "load_config",
    "ThemegenError",
    "ThemeResolutionError",
    "MissingNameError",
    "NoDefaultThemeError",
    "MultipleDefaultThemesError",
    "MultipleScopedDefaultThemesError",
    "ConfigError",
]
