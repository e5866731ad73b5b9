"""COCOMO Basic Model evaluation."""

from __future__ import annotations

import logging
import math

from cocomo_estimate.core.constants import LOC_PER_KLOC, MODE_DESCRIPTIONS, MODEL_CONSTANTS
from cocomo_estimate.core.errors import InvalidSizeError, UnknownModeError
from cocomo_estimate.core.models import (
    DevelopmentMode,
    EstimateInput,
    EstimateResult,
    ModeDescription,
    ModelConstants,
)

logger = logging.getLogger("cocomo_estimate")

_ALLOWED_MODES: tuple[str, ...] = tuple(mode.value for mode in DevelopmentMode)


def resolve_mode(mode: DevelopmentMode | str) -> DevelopmentMode:
    """Resolve a mode selector to a DevelopmentMode.

    Raises:
        UnknownModeError: if ``mode`` names none of the three modes.
    """
    if isinstance(mode, DevelopmentMode):
        return mode
    try:
        return DevelopmentMode(mode)
    except ValueError:
        raise UnknownModeError(mode, _ALLOWED_MODES) from None


def get_constants(mode: DevelopmentMode | str) -> ModelConstants:
    """Return the fixed model constants for a mode."""
    return MODEL_CONSTANTS[resolve_mode(mode)]


def describe_mode(mode: DevelopmentMode | str) -> ModeDescription:
    """Return the summary and typical projects for a mode."""
    return MODE_DESCRIPTIONS[resolve_mode(mode)]


def validate_size(size_kloc: object) -> float:
    """Return ``size_kloc`` as a float, or raise InvalidSizeError.

    Booleans and non-numeric values are rejected rather than coerced.
    """
    if isinstance(size_kloc, bool) or not isinstance(size_kloc, (int, float)):
        raise InvalidSizeError(size_kloc)
    try:
        value = float(size_kloc)
    except OverflowError:
        raise InvalidSizeError(size_kloc) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidSizeError(size_kloc)
    return value


def make_input(size_kloc: float, mode: DevelopmentMode | str) -> EstimateInput:
    """Build a validated EstimateInput (mode is checked before size)."""
    resolved = resolve_mode(mode)
    return EstimateInput(size_kloc=validate_size(size_kloc), mode=resolved)


def _is_positive_finite(value: float) -> bool:
    return math.isfinite(value) and value > 0


def evaluate(estimate_input: EstimateInput) -> EstimateResult:
    """Evaluate the COCOMO Basic equations for a validated input.

    Formulas:
        effort = a * KLOC ** b                  (person-months)
        schedule = c * effort ** d              (months)
        team = effort / schedule
        productivity = KLOC * 1000 / effort     (LOC per person-month)

    Raises:
        InvalidSizeError: if the size is outside the range where the
            equations stay finite and non-zero in floating point.
    """
    constants = MODEL_CONSTANTS[estimate_input.mode]
    size_kloc = estimate_input.size_kloc

    try:
        effort_pm = constants.a * size_kloc**constants.b
        schedule_months = constants.c * effort_pm**constants.d
    except OverflowError:
        raise InvalidSizeError(size_kloc) from None
    if not (_is_positive_finite(effort_pm) and _is_positive_finite(schedule_months)):
        raise InvalidSizeError(size_kloc)

    team_size = effort_pm / schedule_months
    productivity = (size_kloc * LOC_PER_KLOC) / effort_pm
    if not (_is_positive_finite(team_size) and _is_positive_finite(productivity)):
        raise InvalidSizeError(size_kloc)

    logger.debug(
        "cocomo: mode=%s size_kloc=%g effort=%.3fPM schedule=%.3fmo team=%.3f",
        estimate_input.mode.value,
        size_kloc,
        effort_pm,
        schedule_months,
        team_size,
    )

    return EstimateResult(
        effort_pm=effort_pm,
        schedule_months=schedule_months,
        team_size=team_size,
        productivity=productivity,
        size_kloc=size_kloc,
        constants=constants,
        mode=estimate_input.mode,
    )


def estimate(size_kloc: float, mode: DevelopmentMode | str) -> EstimateResult:
    """Estimate effort, schedule, team size and productivity.

    Args:
        size_kloc: Project size in thousands of lines of code; finite and > 0.
        mode: Development mode, as a DevelopmentMode or its string value.

    Returns:
        A fresh, unrounded EstimateResult.

    Raises:
        UnknownModeError: if ``mode`` is not a recognised development mode.
        InvalidSizeError: if ``size_kloc`` is <= 0, NaN, infinite or not numeric.
    """
    return evaluate(make_input(size_kloc, mode))
