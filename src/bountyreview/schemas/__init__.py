"""Pydantic schema definitions for review data structures."""

from __future__ import annotations

from .criteria import CRITERION_LABELS, CRITERION_NAMES, CriteriaSet, Criterion
from .evaluation import CircuitOutput, EvaluationResult, ReviewRequest, ScoreSet

__all__ = [
    "CRITERION_LABELS",
    "CRITERION_NAMES",
    "CircuitOutput",
    "CriteriaSet",
    "Criterion",
    "EvaluationResult",
    "ReviewRequest",
    "ScoreSet",
]
