"""COCOMO Basic Model effort and schedule estimation."""

from cocomo_estimate.core import (
    DevelopmentMode,
    EstimateResult,
    EstimationError,
    InvalidSizeError,
    UnknownModeError,
    estimate,
)
from cocomo_estimate.version import __version__

__all__ = [
    "DevelopmentMode",
    "EstimateResult",
    "EstimationError",
    "InvalidSizeError",
    "UnknownModeError",
    "__version__",
    "estimate",
]
