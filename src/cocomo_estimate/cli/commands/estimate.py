"""Estimate command: evaluate the COCOMO Basic Model for one project."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cocomo_estimate.adapters.config_loader import load_config, load_default_config
from cocomo_estimate.adapters.export import export_report
from cocomo_estimate.cli.commands._errors import exit_with_error
from cocomo_estimate.core import InvalidSizeError, UnknownModeError, estimate
from cocomo_estimate.render import EstimateReport, render_json_report, render_markdown_report

_FORMATS = ("markdown", "json")


def run(
    kloc: float = typer.Argument(
        ..., help="Project size in thousands of lines of code (must be > 0)."
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Development mode: organic, semi-detached or embedded (default from config).",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML."
    ),
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Report title (default from config)."
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also export the JSON report to this file or directory.",
    ),
) -> None:
    """Estimate effort, schedule, team size and productivity for a project."""
    if format not in _FORMATS:
        exit_with_error(f"Unknown format: {format!r}. Use markdown or json.", 2)

    # --- Load config ---
    try:
        cfg = load_config(config) if config else load_default_config()
    except FileNotFoundError:
        exit_with_error(f"Config file not found: {config}", 2)
    except OSError as exc:
        exit_with_error(f"Failed to read config: {exc}", 2)
    except ValueError as exc:
        exit_with_error(f"Config validation error: {exc}", 2)

    # --- Run estimator ---
    selected_mode = mode if mode is not None else cfg.default_mode
    try:
        result = estimate(kloc, selected_mode)
    except UnknownModeError as exc:
        exit_with_error(f"Invalid development mode: {exc}", 2)
    except InvalidSizeError as exc:
        exit_with_error(f"Invalid size: {exc}", 2)

    report = EstimateReport.from_result(result, settings=cfg.report, title=title)

    # --- Export ---
    if output is not None:
        try:
            written = export_report(report, output)
        except OSError as exc:
            exit_with_error(f"Failed to export estimate: {exc}", 1)
        typer.echo(f"Estimate exported to {written}", err=True)

    # --- Output ---
    if format == "markdown":
        typer.echo(render_markdown_report(report))
    else:
        typer.echo(render_json_report(report), nl=False)
