"""JSON report renderer."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from cocomo_estimate.core.constants import MODE_DESCRIPTIONS, MODEL_CONSTANTS
from cocomo_estimate.core.models import DevelopmentMode, ModelConstants
from cocomo_estimate.render.report_models import EstimateReport


def render_json_report(report: EstimateReport) -> str:
    """Render an estimate report as canonical JSON with unrounded values."""
    payload = _build_payload(report)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def render_modes_json(modes: Iterable[DevelopmentMode] = tuple(DevelopmentMode)) -> str:
    """Render the development modes with their constants and guidance."""
    payload = [
        {
            "mode": mode.value,
            "constants": _constants_payload(MODEL_CONSTANTS[mode]),
            "summary": MODE_DESCRIPTIONS[mode].summary,
            "typical_projects": MODE_DESCRIPTIONS[mode].typical_projects,
        }
        for mode in modes
    ]
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def _build_payload(report: EstimateReport) -> dict[str, Any]:
    result = report.result
    return {
        "title": report.title,
        "timestamp": report.generated_at.isoformat(),
        "mode": result.mode.value,
        "size_kloc": result.size_kloc,
        "effort_person_months": result.effort_pm,
        "schedule_months": result.schedule_months,
        "team_size": result.team_size,
        "productivity_loc_per_person_month": result.productivity,
        "constants": _constants_payload(result.constants),
    }


def _constants_payload(constants: ModelConstants) -> dict[str, float]:
    return {"a": constants.a, "b": constants.b, "c": constants.c, "d": constants.d}
