"""Contracts consumed by the evaluator orchestration."""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable

from ..schemas import CircuitOutput, ScoreSet


@runtime_checkable
class Scorer(Protocol):
    """Scorer contract for deriving per-criterion scores."""

    def score(
        self,
        content: str,
        deliverables: Sequence[str],
        metrics: Mapping[str, float] | None = None,
    ) -> ScoreSet:
        """Return the score set for a submission."""


@runtime_checkable
class Circuit(Protocol):
    """Commitment/attestation contract; a real prover would implement this.

    ``execute`` must place the weighted score in ``public_inputs[1]``.
    """

    def execute(self, scores: Mapping[str, float], evaluator_address: str) -> CircuitOutput:
        """Validate scores and return a commitment with its attestation."""

    def verify(self, output: CircuitOutput) -> bool:
        """Return True when ``output`` is acceptable."""
