"""Output rendering modules."""

from cocomo_estimate.render.formatting import format_large_number, format_number
from cocomo_estimate.render.json_report import render_json_report, render_modes_json
from cocomo_estimate.render.markdown_report import (
    render_markdown_report,
    render_modes_markdown,
)
from cocomo_estimate.render.report_models import EstimateReport

__all__ = [
    "EstimateReport",
    "format_large_number",
    "format_number",
    "render_json_report",
    "render_markdown_report",
    "render_modes_json",
    "render_modes_markdown",
]
