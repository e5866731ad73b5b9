"""Write rendered JSON reports to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from cocomo_estimate.render.json_report import render_json_report
from cocomo_estimate.render.report_models import EstimateReport

logger = logging.getLogger("cocomo_estimate")


def export_filename(report: EstimateReport) -> str:
    """Return ``cocomo-estimate-<epoch milliseconds>.json`` for a report."""
    millis = int(report.generated_at.timestamp() * 1000)
    return f"cocomo-estimate-{millis}.json"


def export_report(report: EstimateReport, destination: str | Path) -> Path:
    """Write ``report`` as JSON and return the written path.

    When ``destination`` is an existing directory the file is named by
    ``export_filename``; otherwise ``destination`` is the file path.
    """
    path = Path(destination)
    if path.is_dir():
        path = path / export_filename(report)
    path.write_text(render_json_report(report), encoding="utf-8")
    logger.debug("Exported estimate to %s", path)
    return path
