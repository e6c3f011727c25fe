"""
Error types for themegen theme resolution and configuration.
"""


class ThemegenError(Exception):
    """Base exception for all themegen errors."""

    default_message = "Theme generation failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ThemeResolutionError(ThemegenError):
    """
    Raised when a set of themes cannot be resolved to a single default.

    Resolution errors are fatal: a theme set that fails validation must
    never fall back to an arbitrary theme.
    """

    pass


class MissingNameError(ThemeResolutionError):
    """Raised when a theme is neither named nor marked default."""

    default_message = "Some themes don't have names."


class NoDefaultThemeError(ThemeResolutionError):
    """Raised when no theme without a scheme is marked default."""

    default_message = "There is no default theme."


class MultipleDefaultThemesError(ThemeResolutionError):
    """Raised when more than one theme without a scheme is marked default."""

    default_message = "There are multiple default themes."


class MultipleScopedDefaultThemesError(ThemeResolutionError):
    """Raised when the dark or light scheme has more than one default theme."""

    default_message = "There are multiple default themes for a scheme."


class ConfigError(ThemegenError):
    """
    Raised when a themegen.toml file cannot be loaded.

    Examples:
    - Malformed TOML
    - `hexadecimal` that is not a boolean
    - `color_variable_prefix` that is not a string
    """

    default_message = "Invalid themegen configuration."
