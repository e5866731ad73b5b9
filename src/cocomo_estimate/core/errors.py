"""Estimator error types."""

from __future__ import annotations


class EstimationError(ValueError):
    """Base class for estimator input errors."""


class InvalidSizeError(EstimationError):
    """Raised when the size is not a finite number greater than zero."""

    def __init__(self, size_kloc: object) -> None:
        self.size_kloc = size_kloc
        super().__init__(
            f"size_kloc must be a finite number greater than 0, got {size_kloc!r}"
        )


class UnknownModeError(EstimationError):
    """Raised when a mode selector names none of the development modes."""

    def __init__(self, mode: object, allowed: tuple[str, ...]) -> None:
        self.mode = mode
        self.allowed = allowed
        super().__init__(
            f"Unknown development mode {mode!r}; expected one of: {', '.join(allowed)}"
        )
