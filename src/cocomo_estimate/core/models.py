"""Pydantic models for estimator configuration and result dataclasses."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class DevelopmentMode(enum.Enum):
    """COCOMO development mode; selects the constant row.

    ORGANIC: small, experienced teams on familiar problems
    SEMI_DETACHED: medium complexity, mixed experience
    EMBEDDED: tight hardware, software or operational constraints

    Lookup is case-insensitive, and "semi_detached", "semi detached" and
    "semidetached" all resolve to SEMI_DETACHED.
    """

    ORGANIC = "organic"
    SEMI_DETACHED = "semi-detached"
    EMBEDDED = "embedded"

    @classmethod
    def _missing_(cls, value: object) -> "DevelopmentMode | None":
        """Accept alternative spellings of the mode names."""
        if not isinstance(value, str):
            return None
        normalized = re.sub(r"[\s_]+", "-", value.strip().lower())
        if normalized == "semidetached":
            normalized = cls.SEMI_DETACHED.value
        for member in cls:
            if member.value == normalized:
                return member
        return None


# ---------------------------------------------------------------------------
# Pydantic config models (input validation)
# ---------------------------------------------------------------------------


class ReportSettings(BaseModel):
    """Presentation settings applied by the renderers, never by the core."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr = "COCOMO Estimate"
    decimals: Annotated[int, Field(ge=0, le=6)] = 1
    round_team_size: bool = True


class EstimatorConfig(BaseModel):
    """Top-level config object for the CLI."""

    model_config = ConfigDict(extra="forbid")

    default_mode: DevelopmentMode = DevelopmentMode.ORGANIC
    report: ReportSettings = Field(default_factory=ReportSettings)


# ---------------------------------------------------------------------------
# Model dataclasses (frozen)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModelConstants:
    """COCOMO Basic coefficients for one development mode.

    Effort = a * KLOC ** b, Schedule = c * Effort ** d
    """

    a: float
    b: float
    c: float
    d: float


@dataclass(frozen=True)
class ModeDescription:
    """Human-readable guidance for choosing a development mode."""

    summary: str
    typical_projects: str


@dataclass(frozen=True)
class EstimateInput:
    """Validated estimator input.

    Build instances with ``cocomo_estimate.core.cocomo.make_input`` so the
    size and mode invariants are checked.
    """

    size_kloc: float
    mode: DevelopmentMode


@dataclass(frozen=True)
class EstimateResult:
    """Unrounded COCOMO Basic outputs for one input."""

    effort_pm: float  # person-months
    schedule_months: float
    team_size: float  # average head count
    productivity: float  # LOC per person-month
    size_kloc: float
    constants: ModelConstants
    mode: DevelopmentMode
