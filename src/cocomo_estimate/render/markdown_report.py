"""Markdown report renderer."""

from __future__ import annotations

from collections.abc import Iterable

from cocomo_estimate.core.constants import LOC_PER_KLOC, MODE_DESCRIPTIONS, MODEL_CONSTANTS
from cocomo_estimate.core.models import DevelopmentMode
from cocomo_estimate.render.formatting import (
    format_fixed,
    format_large_number,
    format_number,
    round_half_up,
)
from cocomo_estimate.render.report_models import EstimateReport


def render_markdown_report(report: EstimateReport) -> str:
    """Render an estimate report as GitHub-compatible Markdown."""
    lines: list[str] = [
        f"# {report.title}",
        "",
    ]
    lines.extend(_render_inputs(report))
    lines.extend([""])
    lines.extend(_render_constants(report))
    lines.extend([""])
    lines.extend(_render_estimates(report))
    lines.append("")
    return "\n".join(lines)


def render_modes_markdown(modes: Iterable[DevelopmentMode] = tuple(DevelopmentMode)) -> str:
    """Render the development modes with their constants and guidance."""
    lines = [
        "# COCOMO Development Modes",
        "",
        "| Mode | a | b | c | d | Summary | Typical Projects |",
        "| --- | --- | --- | --- | --- | --- | --- |",
    ]
    for mode in modes:
        constants = MODEL_CONSTANTS[mode]
        description = MODE_DESCRIPTIONS[mode]
        lines.append(
            f"| {mode.value} | {constants.a:g} | {constants.b:g} | {constants.c:g} | "
            f"{constants.d:g} | {_escape_cell(description.summary)} | "
            f"{_escape_cell(description.typical_projects)} |"
        )
    lines.append("")
    return "\n".join(lines)


def _render_inputs(report: EstimateReport) -> list[str]:
    result = report.result
    return [
        "## Inputs",
        "",
        "| Input | Value |",
        "| --- | --- |",
        f"| Size | {format_number(result.size_kloc, 3)} KLOC |",
        f"| Lines of code | {format_large_number(result.size_kloc * LOC_PER_KLOC)} |",
        f"| Development mode | {result.mode.value} |",
        f"| Mode profile | {_escape_cell(report.mode_description.summary)} |",
    ]


def _render_constants(report: EstimateReport) -> list[str]:
    constants = report.result.constants
    return [
        "## Model Constants",
        "",
        "| a | b | c | d |",
        "| --- | --- | --- | --- |",
        f"| {constants.a:g} | {constants.b:g} | {constants.c:g} | {constants.d:g} |",
    ]


def _render_estimates(report: EstimateReport) -> list[str]:
    result = report.result
    decimals = report.settings.decimals
    if report.settings.round_team_size:
        team = str(round_half_up(result.team_size))
    else:
        team = format_fixed(result.team_size, decimals)
    return [
        "## Estimates",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Effort | {format_fixed(result.effort_pm, decimals)} person-months |",
        f"| Development time | {format_fixed(result.schedule_months, decimals)} months |",
        f"| Average team size | {team} people |",
        f"| Productivity | {format_fixed(result.productivity, decimals)} LOC/person-month |",
    ]


def _escape_cell(value: str) -> str:
    normalized = value.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    return normalized.replace("|", "\\|")
