"""Modes command: list development modes and their constants."""

from __future__ import annotations

import typer

from cocomo_estimate.cli.commands._errors import exit_with_error
from cocomo_estimate.render import render_modes_json, render_modes_markdown


def run(
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
) -> None:
    """List the COCOMO development modes."""
    if format == "markdown":
        typer.echo(render_modes_markdown())
    elif format == "json":
        typer.echo(render_modes_json(), nl=False)
    else:
        exit_with_error(f"Unknown format: {format!r}. Use markdown or json.", 2)
