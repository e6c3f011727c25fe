"""
Default theme resolver for themegen.

Validates a set of themes and selects the unscoped default theme.
Validation runs against the full set in a fixed order:
1. Every non-default theme has a name
2. Exactly one unscoped theme is marked default
3. At most one default theme per scheme (dark, light)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from themegen.core.errors import (
    MissingNameError,
    MultipleDefaultThemesError,
    MultipleScopedDefaultThemesError,
    NoDefaultThemeError,
    ThemeResolutionError,
)
from themegen.core.ir import ThemeScheme, ThemeSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ThemeViews:
    """Filtered views over one theme set."""

    unnamed: list[ThemeSpec]
    defaults_without_scheme: list[ThemeSpec]
    defaults_dark: list[ThemeSpec]
    defaults_light: list[ThemeSpec]


# Checked top to bottom; the first matching rule's error is raised.
_RULES: list[tuple[Callable[[_ThemeViews], bool], type[ThemeResolutionError]]] = [
    (lambda views: len(views.unnamed) > 0, MissingNameError),
    (lambda views: len(views.defaults_without_scheme) == 0, NoDefaultThemeError),
    (lambda views: len(views.defaults_without_scheme) > 1, MultipleDefaultThemesError),
    (
        lambda views: len(views.defaults_dark) > 1 or len(views.defaults_light) > 1,
        MultipleScopedDefaultThemesError,
    ),
]


def _build_views(themes: Sequence[ThemeSpec]) -> _ThemeViews:
    return _ThemeViews(
        unnamed=[t for t in themes if not t.has_name() and not t.is_default()],
        defaults_without_scheme=[t for t in themes if t.is_default() and not t.has_scheme()],
        defaults_dark=[
            t for t in themes if t.is_default() and t.get_scheme() == ThemeScheme.DARK
        ],
        defaults_light=[
            t for t in themes if t.is_default() and t.get_scheme() == ThemeScheme.LIGHT
        ],
    )


def _validate(themes: Sequence[ThemeSpec]) -> _ThemeViews:
    views = _build_views(themes)
    for predicate, error in _RULES:
        if predicate(views):
            logger.debug("Theme validation failed: %s", error.__name__)
            raise error()
    return views


def resolve_default_theme(themes: Iterable[ThemeSpec]) -> ThemeSpec:
    """
    Get the default theme out of a set of themes.

    Args:
        themes: All theme definitions

    Returns:
        The single default theme that has no scheme

    Raises:
        MissingNameError: A theme is neither named nor default
        NoDefaultThemeError: No unscoped theme is marked default
        MultipleDefaultThemesError: Several unscoped themes are marked default
        MultipleScopedDefaultThemesError: A scheme has several default themes
    """
    themes = list(themes)
    views = _validate(themes)
    default_theme = views.defaults_without_scheme[0]
    logger.debug("Resolved default theme %r out of %d", default_theme.name, len(themes))
    return default_theme


def get_scheme_default_theme(
    themes: Iterable[ThemeSpec], scheme: ThemeScheme
) -> ThemeSpec | None:
    """
    Get the default theme for one scheme, or None if the scheme has none.

    The whole set is validated first, so this raises the same errors as
    resolve_default_theme().
    """
    themes = list(themes)
    views = _validate(themes)
    candidates = views.defaults_dark if scheme == ThemeScheme.DARK else views.defaults_light
    return candidates[0] if candidates else None
