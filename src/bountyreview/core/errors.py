"""Exception hierarchy for the review engine."""

from __future__ import annotations


class BountyReviewError(Exception):
    """Base exception for all review engine errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ValidationError(BountyReviewError):
    """Raised when scoring or circuit inputs are malformed."""


class CircuitVerificationError(BountyReviewError):
    """Raised when a freshly produced circuit output fails its shape check.

    Signals an internal defect rather than bad user input.
    """


class ConfigurationError(BountyReviewError):
    """Raised when configuration loading or validation fails."""
