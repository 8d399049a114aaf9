"""Evaluator orchestration: scoring, circuit execution, approval, history."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..schemas import EvaluationResult, ReviewRequest
from .approval import ApprovalPolicy
from .circuit import now_ms
from .errors import CircuitVerificationError, ValidationError
from .history import HistoryStatistics, HistoryStore, InMemoryHistoryStore
from .protocols import Circuit, Scorer
from .report import render_audit_report


class BountyEvaluator:
    """Run submissions through scorer, circuit and approval policy.

    Each instance owns its history store; the latest result per bounty id
    wins.
    """

    def __init__(
        self,
        *,
        scorer: Scorer,
        circuit: Circuit,
        policy: ApprovalPolicy,
        history: HistoryStore | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._scorer = scorer
        self._circuit = circuit
        self._policy = policy
        self._history = history if history is not None else InMemoryHistoryStore()
        self._clock = clock or now_ms

    def evaluate(
        self,
        request: ReviewRequest | Mapping[str, Any],
        evaluator_address: str,
    ) -> EvaluationResult:
        review = self._coerce_request(request)

        scores = self._scorer.score(
            review.submission_content,
            review.deliverables,
            review.metrics,
        )
        circuit_output = self._circuit.execute(scores, evaluator_address)
        if not self._circuit.verify(circuit_output):
            raise CircuitVerificationError(
                "Circuit verification failed",
                context={"bounty_id": review.bounty_id},
            )

        weighted_score = float(circuit_output.public_inputs[1])
        approved = self._policy.decide(scores, weighted_score)

        result = EvaluationResult(
            bounty_id=review.bounty_id,
            scores=scores,
            weighted_score=weighted_score,
            zk_proof=circuit_output.proof,
            circuit_output=circuit_output,
            approved=approved,
            timestamp=self._clock(),
        )
        self._history.upsert(result)
        return result

    def verify(self, evaluation: EvaluationResult) -> bool:
        return self._circuit.verify(evaluation.circuit_output)

    def audit_report(self, evaluation: EvaluationResult) -> str:
        return render_audit_report(evaluation)

    def history(self) -> Mapping[str, EvaluationResult]:
        return self._history.view()

    def statistics(self) -> HistoryStatistics:
        return HistoryStatistics.from_results(self._history.view())

    @staticmethod
    def _coerce_request(request: ReviewRequest | Mapping[str, Any]) -> ReviewRequest:
        if isinstance(request, ReviewRequest):
            return request
        if not isinstance(request, Mapping):
            raise ValidationError(
                "Review request must be a mapping",
                context={"type": type(request).__name__},
            )
        try:
            return ReviewRequest.model_validate(dict(request))
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid review request",
                context={"errors": exc.errors()},
            ) from exc
