"""Core COCOMO Basic models and estimator."""

from cocomo_estimate.core.cocomo import (
    describe_mode,
    estimate,
    evaluate,
    get_constants,
    make_input,
    resolve_mode,
    validate_size,
)
from cocomo_estimate.core.constants import MODE_DESCRIPTIONS, MODEL_CONSTANTS
from cocomo_estimate.core.errors import EstimationError, InvalidSizeError, UnknownModeError
from cocomo_estimate.core.models import (
    DevelopmentMode,
    EstimateInput,
    EstimateResult,
    EstimatorConfig,
    ModeDescription,
    ModelConstants,
    ReportSettings,
)

__all__ = [
    "DevelopmentMode",
    "EstimateInput",
    "EstimateResult",
    "EstimationError",
    "EstimatorConfig",
    "InvalidSizeError",
    "MODE_DESCRIPTIONS",
    "MODEL_CONSTANTS",
    "ModeDescription",
    "ModelConstants",
    "ReportSettings",
    "UnknownModeError",
    "describe_mode",
    "estimate",
    "evaluate",
    "get_constants",
    "make_input",
    "resolve_mode",
    "validate_size",
]
