"""Wire models for review requests, circuit outputs and evaluation results."""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .criteria import normalize_scores, wire_name

ScoreSet = dict[str, float]


class ReviewRequest(BaseModel):
    """Submission handed to the evaluator."""

    bounty_id: str
    submission_content: str
    deliverables: list[str] = Field(default_factory=list)
    metrics: dict[str, float] | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CircuitOutput(BaseModel):
    """Commitment and attestation produced by one circuit execution.

    ``public_inputs`` holds ``(commitment, weighted_score)`` and
    ``private_inputs`` the canonical serialized input record.
    """

    commitment: str
    public_inputs: tuple[str, ...]
    private_inputs: tuple[str, ...]
    proof: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class EvaluationResult(BaseModel):
    """Outcome of a single bounty evaluation.

    Score keys are stored under their snake_case criterion names and
    accept the camelCase spelling on input. Alias serialization (the wire
    format) emits camelCase score keys to match the other fields.
    """

    bounty_id: str
    scores: ScoreSet
    weighted_score: float
    zk_proof: str
    circuit_output: CircuitOutput
    approved: bool
    timestamp: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("scores", mode="before")
    @classmethod
    def _canonical_score_keys(cls, value):
        if isinstance(value, dict):
            return normalize_scores(value)
        return value

    @field_serializer("scores")
    def _serialize_scores(self, scores: ScoreSet, info: FieldSerializationInfo) -> dict:
        if info.by_alias:
            return {wire_name(name): value for name, value in scores.items()}
        return dict(scores)

    def to_wire(self) -> dict:
        """Return the camelCase JSON-compatible representation."""
        return self.model_dump(mode="json", by_alias=True)
