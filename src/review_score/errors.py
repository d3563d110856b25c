"""
Errors Module

Exception hierarchy for rating-score computation.

Every validation failure derives from InvalidArgument (itself a ValueError)
so callers can catch at whatever granularity they need.
"""

from typing import Iterable


class InvalidArgument(ValueError):
    """Base exception for all invalid scoring input."""


class InvalidMode(InvalidArgument):
    """Raised when the estimator name is not recognised."""

    def __init__(self, mode: str, valid_modes: Iterable[str]):
        self.mode = mode
        self.valid_modes = list(valid_modes)
        super().__init__(
            f"Unknown scorer '{mode}'. First argument must be one of: "
            + ", ".join(self.valid_modes)
        )


class InvalidConfidence(InvalidArgument):
    """Raised when a confidence level is missing, non-numeric or outside (0, 1)."""

    def __init__(self, value: object, option: str = "--conf"):
        self.value = value
        self.option = option
        super().__init__(
            f"Argument for option {option} must be numeric, decimal valued "
            f"and between 0 and 1 (got {value!r})"
        )


class InvalidArgumentCount(InvalidArgument):
    """Raised when too few or too many numeric arguments are supplied."""


class InvalidNumericInput(InvalidArgument):
    """Raised when an argument cannot be interpreted as the required number."""


class InvalidRatingData(InvalidArgument):
    """Raised when rating counts are inconsistent or degenerate."""


class InvalidConfig(InvalidArgument):
    """Raised when a configuration file holds invalid values."""

    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(f"Invalid configuration in {path}: {detail}")
