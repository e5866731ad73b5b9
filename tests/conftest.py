"""Shared fixtures for cocomo_estimate test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from cocomo_estimate.core.cocomo import estimate
from cocomo_estimate.core.models import DevelopmentMode, EstimateResult, ReportSettings
from cocomo_estimate.render.report_models import EstimateReport

FIXED_TIMESTAMP = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def organic_result() -> EstimateResult:
    """Organic estimate for a 10 KLOC project."""
    return estimate(10, DevelopmentMode.ORGANIC)


@pytest.fixture
def embedded_result() -> EstimateResult:
    """Embedded estimate for a 50 KLOC project."""
    return estimate(50, DevelopmentMode.EMBEDDED)


@pytest.fixture
def report_settings() -> ReportSettings:
    """Default presentation settings."""
    return ReportSettings()


@pytest.fixture
def organic_report(organic_result: EstimateResult, report_settings: ReportSettings) -> EstimateReport:
    """Report for the organic estimate with a fixed timestamp."""
    return EstimateReport.from_result(
        organic_result, settings=report_settings, generated_at=FIXED_TIMESTAMP
    )
