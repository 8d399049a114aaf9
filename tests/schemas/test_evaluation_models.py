from __future__ import annotations

import pytest
from pydantic import ValidationError

from bountyreview.schemas import CircuitOutput, EvaluationResult, ReviewRequest


def test_review_request_accepts_camel_and_snake_case():
    camel = ReviewRequest.model_validate(
        {"bountyId": "B-1", "submissionContent": "text", "deliverables": ["a"]}
    )
    snake = ReviewRequest(bounty_id="B-1", submission_content="text", deliverables=["a"])

    assert camel == snake
    assert camel.metrics is None


def test_review_request_requires_identity_and_content():
    with pytest.raises(ValidationError):
        ReviewRequest.model_validate({"bountyId": "B-1"})


def test_evaluation_result_wire_format_uses_camel_case():
    output = CircuitOutput(
        commitment="0" * 64,
        public_inputs=("0" * 64, "70.0"),
        private_inputs=("{}",),
        proof="0x" + "1" * 64,
    )
    result = EvaluationResult(
        bounty_id="B-1",
        scores={"security": 80},
        weighted_score=70.0,
        zk_proof=output.proof,
        circuit_output=output,
        approved=True,
        timestamp=1,
    )

    wire = result.to_wire()

    assert set(wire) == {
        "bountyId",
        "scores",
        "weightedScore",
        "zkProof",
        "circuitOutput",
        "approved",
        "timestamp",
    }
    assert wire["circuitOutput"]["publicInputs"] == ["0" * 64, "70.0"]
    assert EvaluationResult.model_validate(wire) == result


def test_circuit_output_is_frozen():
    output = CircuitOutput(
        commitment="0" * 64,
        public_inputs=("0" * 64, "1"),
        private_inputs=("{}",),
        proof="0x",
    )

    with pytest.raises(ValidationError):
        output.commitment = "changed"


def test_score_keys_follow_the_serialization_mode():
    output = CircuitOutput(
        commitment="0" * 64,
        public_inputs=("0" * 64, "90.0"),
        private_inputs=("{}",),
        proof="0x" + "1" * 64,
    )
    result = EvaluationResult.model_validate(
        {
            "bountyId": "B-2",
            "scores": {"codeQuality": 90, "security": 80},
            "weightedScore": 90.0,
            "zkProof": output.proof,
            "circuitOutput": output,
            "approved": True,
            "timestamp": 1,
        }
    )

    assert result.scores == {"code_quality": 90, "security": 80}
    assert result.to_wire()["scores"] == {"codeQuality": 90, "security": 80}
    assert result.model_dump()["scores"] == {"code_quality": 90, "security": 80}
