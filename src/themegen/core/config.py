"""
Generator configuration loaded from themegen.toml.

Only two options reach the naming layer:

    [generator]
    hexadecimal = false            # emit #rrggbbaa instead of channel lists
    color_variable_prefix = "app"  # --app-primary instead of --primary
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "themegen.toml"

# Accepted spellings for each option, first one is canonical
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "hexadecimal": ("hexadecimal",),
    "color_variable_prefix": ("color_variable_prefix", "colorVariablePrefix"),
}


@dataclass(frozen=True)
class GeneratorConfig:
    """Read-only options consumed by the naming and value formatters."""

    hexadecimal: bool = False
    color_variable_prefix: str = ""


def find_config(start: Path) -> Path | None:
    """Find themegen.toml in `start` or the nearest parent directory."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> GeneratorConfig:
    """
    Load generator options from a TOML file.

    Args:
        path: Path to a themegen.toml file

    Returns:
        GeneratorConfig with defaults for anything not set

    Raises:
        ConfigError: If the file is unreadable, malformed or has bad types
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("generator", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[generator] in {path} must be a table")

    config = _parse_generator_section(section, path)
    logger.debug(
        "Loaded %s: hexadecimal=%s prefix=%r",
        path,
        config.hexadecimal,
        config.color_variable_prefix,
    )
    return config


def _parse_generator_section(section: dict[str, Any], path: Path) -> GeneratorConfig:
    known = {alias for aliases in _KEY_ALIASES.values() for alias in aliases}
    for key in section:
        if key not in known:
            logger.warning("Ignoring unknown option %r in %s", key, path)

    values: dict[str, Any] = {}
    for field_name, aliases in _KEY_ALIASES.items():
        present = [alias for alias in aliases if alias in section]
        if not present:
            continue
        values[field_name] = section[present[0]]
        for alias in present[1:]:
            logger.warning(
                "Ignoring %r in %s, %r is already set", alias, path, present[0]
            )

    hexadecimal = values.get("hexadecimal", False)
    if not isinstance(hexadecimal, bool):
        raise ConfigError(f"'hexadecimal' in {path} must be true or false")

    prefix = values.get("color_variable_prefix", "")
    if not isinstance(prefix, str):
        raise ConfigError(f"'color_variable_prefix' in {path} must be a string")

    return GeneratorConfig(hexadecimal=hexadecimal, color_variable_prefix=prefix)
