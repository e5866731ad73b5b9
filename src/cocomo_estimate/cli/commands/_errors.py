"""Shared CLI error exit helper."""

from __future__ import annotations

from typing import NoReturn

import typer


def exit_with_error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)
