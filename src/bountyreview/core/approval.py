"""Approval decision from the weighted score and critical criteria."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..schemas import CriteriaSet
from ..schemas.criteria import normalize_scores
from .errors import ValidationError


class ApprovalPolicy:
    """Approve when the weighted score and every critical criterion pass."""

    DEFAULT_MIN_WEIGHTED_SCORE: float = 65.0
    DEFAULT_CRITICAL_CRITERIA: tuple[str, ...] = ("security", "completeness")

    def __init__(
        self,
        criteria: CriteriaSet,
        *,
        min_weighted_score: float | None = None,
        critical_criteria: Iterable[str] | None = None,
    ) -> None:
        self._criteria = criteria
        self._min_weighted_score = (
            self.DEFAULT_MIN_WEIGHTED_SCORE
            if min_weighted_score is None
            else float(min_weighted_score)
        )
        self._critical = tuple(
            critical_criteria
            if critical_criteria is not None
            else self.DEFAULT_CRITICAL_CRITERIA
        )
        unknown = [name for name in self._critical if name not in criteria]
        if unknown:
            raise ValidationError(
                "Critical criteria must exist in the criteria set",
                context={"unknown": unknown},
            )

    @property
    def min_weighted_score(self) -> float:
        return self._min_weighted_score

    @property
    def critical_criteria(self) -> tuple[str, ...]:
        return self._critical

    def decide(self, scores: Mapping[str, float], weighted_score: float) -> bool:
        if weighted_score < self._min_weighted_score:
            return False
        scores = normalize_scores(scores)
        return all(
            scores.get(name, 0) >= self._criteria[name].threshold
            for name in self._critical
        )
