"""Core evaluation engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .approval import ApprovalPolicy
from .circuit import EvaluationCircuit
from .criteria import DEFAULT_CRITERIA, build_criteria
from .errors import (
    BountyReviewError,
    CircuitVerificationError,
    ConfigurationError,
    ValidationError,
)
from .evaluator import BountyEvaluator
from .history import HistoryStatistics, HistoryStore, InMemoryHistoryStore
from .protocols import Circuit, Scorer
from .report import render_audit_report
from .scorer import HeuristicScorer


__all__ = [
    "ApprovalPolicy",
    "BountyEvaluator",
    "BountyReviewError",
    "Circuit",
    "CircuitVerificationError",
    "ConfigurationError",
    "DEFAULT_CRITERIA",
    "EvaluationCircuit",
    "HeuristicScorer",
    "HistoryStatistics",
    "HistoryStore",
    "InMemoryHistoryStore",
    "Scorer",
    "ValidationError",
    "build_criteria",
    "render_audit_report",
]
