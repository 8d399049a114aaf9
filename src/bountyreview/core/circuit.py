"""Evaluation circuit: threshold gating, weighted scoring and attestation.

The circuit binds validated scores to a SHA-256 commitment and salts a
second digest with a random nonce to form the ``proof`` string. This is a
hash commitment plus attestation, not a succinct zero-knowledge proof: there
is no soundness guarantee and nothing is hidden from whoever holds the
private inputs. A real proving system would sit behind the same
``execute``/``verify`` contract.
"""

from __future__ import annotations

import hashlib
import json
import math
import re
import secrets
from numbers import Real
from typing import Any, Callable, Mapping

import pendulum

from ..schemas import CircuitOutput, CriteriaSet, ScoreSet
from ..schemas.criteria import canonical_name
from .errors import ValidationError

SCORE_MIN = 0.0
SCORE_MAX = 100.0
COMMITMENT_LENGTH = 64
PROOF_PREFIX = "0x"

# finite decimal literal: no underscores, no inf/nan spellings, no empty string
NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(pendulum.now("UTC").timestamp() * 1000)


def default_nonce() -> str:
    return secrets.token_hex(8)


def canonical_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def sha256_hex(payload: str) -> str:
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class EvaluationCircuit:
    """Validate scores against criteria and emit a commitment/proof pair."""

    def __init__(
        self,
        criteria: CriteriaSet,
        *,
        clock: Callable[[], int] | None = None,
        nonce_source: Callable[[], str] | None = None,
    ) -> None:
        self._criteria = criteria
        self._clock = clock or now_ms
        self._nonce_source = nonce_source or default_nonce

    @property
    def criteria(self) -> CriteriaSet:
        return self._criteria

    def execute(self, scores: Mapping[str, float], evaluator_address: str) -> CircuitOutput:
        validated = self.validate(scores)
        timestamp = self._clock()

        inputs: dict[str, Any] = dict(validated)
        inputs["evaluator"] = evaluator_address
        inputs["timestamp"] = timestamp
        serialized_inputs = canonical_json(inputs)

        commitment = sha256_hex(serialized_inputs)
        proof = self._attest(commitment, timestamp)
        weighted = self.weighted_score(validated)

        return CircuitOutput(
            commitment=commitment,
            public_inputs=(commitment, str(weighted)),
            private_inputs=(serialized_inputs,),
            proof=proof,
        )

    def verify(self, output: CircuitOutput) -> bool:
        """Check the shape of a circuit output.

        Only structure is checked: a forged commitment or a score that does
        not match the commitment still passes. The weighted score must be a
        finite decimal literal such as ``76.0``, ``-3`` or ``1e-05``; empty
        strings, ``inf``/``nan`` spellings and digit separators are rejected.
        """
        if len(output.commitment) != COMMITMENT_LENGTH:
            return False
        if not output.proof.startswith(PROOF_PREFIX):
            return False
        if len(output.public_inputs) != 2:
            return False
        return NUMERIC_LITERAL.fullmatch(output.public_inputs[1]) is not None

    def validate(self, scores: Mapping[str, float]) -> ScoreSet:
        if not isinstance(scores, Mapping):
            raise ValidationError(
                "Scores must be a mapping of criterion name to number",
                context={"type": type(scores).__name__},
            )

        validated: ScoreSet = {}
        for key, score in scores.items():
            name = canonical_name(key)
            criterion = self._criteria.criterion(name)
            if criterion is None:
                continue
            if isinstance(score, bool) or not isinstance(score, Real):
                raise ValidationError(
                    f"Score for {name!r} must be numeric",
                    context={"criterion": name, "value": repr(score)},
                )
            if math.isnan(score):
                validated[name] = 0
                continue
            clamped = self.clamp(score)
            validated[name] = clamped if clamped >= criterion.threshold else 0
        return validated

    def weighted_score(self, validated: Mapping[str, float]) -> float:
        total_weight = 0.0
        weighted_sum = 0.0
        for name, score in validated.items():
            criterion = self._criteria.criterion(name)
            if criterion is None:
                continue
            # weight counts even when the threshold zeroed the score
            total_weight += criterion.weight
            weighted_sum += score * criterion.weight
        return weighted_sum / total_weight if total_weight > 0 else 0.0

    @staticmethod
    def clamp(value: float) -> float:
        return max(SCORE_MIN, min(SCORE_MAX, value))

    def _attest(self, commitment: str, timestamp: int) -> str:
        record = {
            "commitment": commitment,
            "timestamp": timestamp,
            "nonce": self._nonce_source(),
        }
        return PROOF_PREFIX + sha256_hex(canonical_json(record))
