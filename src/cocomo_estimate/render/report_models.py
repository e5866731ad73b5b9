"""Shared report data models for renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from cocomo_estimate.core.cocomo import describe_mode
from cocomo_estimate.core.models import EstimateResult, ModeDescription, ReportSettings


@dataclass(frozen=True)
class EstimateReport:
    """Renderer input bundle for one estimate."""

    result: EstimateResult
    mode_description: ModeDescription
    settings: ReportSettings = field(default_factory=ReportSettings)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def title(self) -> str:
        return self.settings.title

    @classmethod
    def from_result(
        cls,
        result: EstimateResult,
        *,
        settings: ReportSettings | None = None,
        title: str | None = None,
        generated_at: datetime | None = None,
    ) -> "EstimateReport":
        """Construct a report from an EstimateResult.

        ``title`` overrides ``settings.title`` when given.
        """
        resolved = settings if settings is not None else ReportSettings()
        if title is not None:
            resolved = resolved.model_copy(update={"title": title})
        return cls(
            result=result,
            mode_description=describe_mode(result.mode),
            settings=resolved,
            generated_at=generated_at or datetime.now(timezone.utc),
        )
