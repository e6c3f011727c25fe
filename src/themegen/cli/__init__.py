"""
themegen CLI Package.

- commands.py: main Typer application and inspection commands
"""

from themegen.cli.commands import app, main

__all__ = [
    "app",
    "main",
]
