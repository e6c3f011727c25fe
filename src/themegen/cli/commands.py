"""
themegen command line.

Inspection commands that print the variable names and values the naming
layer produces, using options from themegen.toml where present.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import typer

from themegen.core.config import GeneratorConfig, find_config, load_config
from themegen.core.errors import ThemegenError
from themegen.core.ir import RGBA, ColorSpec, ColorVariantSpec
from themegen.themes import (
    get_color_css_configuration,
    get_color_css_variable_value,
    get_color_variable_name,
    get_color_variant_css_configuration,
    get_color_variant_css_variable_value,
    get_color_variant_variable_name,
    get_pascal_case,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="themegen - CSS variable names and values for color themes",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """themegen CLI main callback for global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _resolve_config(
    config_path: Path | None, prefix: str | None, hexadecimal: bool | None
) -> GeneratorConfig:
    """Load the config file (explicit or discovered) and apply CLI overrides."""
    path = config_path or find_config(Path.cwd())
    try:
        config = load_config(path) if path else GeneratorConfig()
    except ThemegenError as e:
        typer.echo(f"Error loading config: {e.message}", err=True)
        raise typer.Exit(code=1)

    if prefix is not None:
        config = replace(config, color_variable_prefix=prefix)
    if hexadecimal is not None:
        config = replace(config, hexadecimal=hexadecimal)
    logger.debug("Using %s", config)
    return config


def _make_rgba(r: float, g: float, b: float, alpha: float) -> RGBA:
    try:
        return RGBA(r=r, g=g, b=b, a=alpha)
    except ValueError as e:
        typer.echo(f"Invalid color: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("pascal")
def pascal_command(text: str = typer.Argument(..., help="Identifier to split")) -> None:
    """Print an identifier as lowercase hyphen-joined words."""
    typer.echo(get_pascal_case(text))


@app.command("color")
def color_command(
    key_name: str = typer.Argument(..., help="Color key name (e.g. primary)"),
    r: float = typer.Option(0, "--r", help="Red channel (0-255)"),
    g: float = typer.Option(0, "--g", help="Green channel (0-255)"),
    b: float = typer.Option(0, "--b", help="Blue channel (0-255)"),
    alpha: float = typer.Option(1, "--alpha", "-a", help="Alpha (0-1)"),
    prefix: str | None = typer.Option(None, "--prefix", "-p", help="Color variable prefix"),
    hexadecimal: bool | None = typer.Option(
        None, "--hex/--no-hex", help="Emit hexadecimal values"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to themegen.toml"
    ),
) -> None:
    """Print the variable name, stored value and reference for a color."""
    config = _resolve_config(config_path, prefix, hexadecimal)
    color = ColorSpec(key_name=key_name, computed=_make_rgba(r, g, b, alpha))

    typer.echo(f"name:      {get_color_variable_name(color, config)}")
    typer.echo(f"value:     {get_color_css_variable_value(color, config)}")
    typer.echo(f"reference: {get_color_css_configuration(color, config)}")


@app.command("variant")
def variant_command(
    name: str = typer.Argument(..., help="Variant name (e.g. hover)"),
    r: float = typer.Option(0, "--r", help="Red channel (0-255)"),
    g: float = typer.Option(0, "--g", help="Green channel (0-255)"),
    b: float = typer.Option(0, "--b", help="Blue channel (0-255)"),
    alpha: float = typer.Option(1, "--alpha", "-a", help="Alpha (0-1)"),
    scope: list[str] | None = typer.Option(
        None, "--scope", "-s", help="Color the variant applies to (repeatable)"
    ),
    hexadecimal: bool | None = typer.Option(
        None, "--hex/--no-hex", help="Emit hexadecimal values"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to themegen.toml"
    ),
) -> None:
    """Print the variable name, stored value and reference for a color variant."""
    config = _resolve_config(config_path, None, hexadecimal)
    variant = ColorVariantSpec(
        name=name, colors=list(scope or []), color=_make_rgba(r, g, b, alpha)
    )

    typer.echo(f"name:      {get_color_variant_variable_name(variant)}")
    typer.echo(f"value:     {get_color_variant_css_variable_value(variant, config)}")
    typer.echo(f"reference: {get_color_variant_css_configuration(variant, config)}")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
