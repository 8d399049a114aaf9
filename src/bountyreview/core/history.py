"""Evaluation history storage."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable

from ..schemas import EvaluationResult


@runtime_checkable
class HistoryStore(Protocol):
    """Latest evaluation per bounty id."""

    def upsert(self, result: EvaluationResult) -> None:
        """Store ``result``, replacing any previous entry for its bounty id."""

    def get(self, bounty_id: str) -> EvaluationResult | None:
        """Return the stored result for ``bounty_id`` if any."""

    def view(self) -> Mapping[str, EvaluationResult]:
        """Return a live read-only view of all entries."""

    def __len__(self) -> int: ...


class InMemoryHistoryStore:
    """Process-local store. Unbounded, never evicts, not persisted."""

    def __init__(self) -> None:
        self._entries: dict[str, EvaluationResult] = {}

    def upsert(self, result: EvaluationResult) -> None:
        self._entries[result.bounty_id] = result

    def get(self, bounty_id: str) -> EvaluationResult | None:
        return self._entries.get(bounty_id)

    def view(self) -> Mapping[str, EvaluationResult]:
        return MappingProxyType(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(slots=True)
class HistoryStatistics:
    """Approval counts and mean weighted score over stored evaluations."""

    total: int
    approved: int
    rejected: int
    average_score: float

    @property
    def approval_rate(self) -> float:
        return self.approved / self.total * 100 if self.total else 0.0

    @property
    def rejection_rate(self) -> float:
        return self.rejected / self.total * 100 if self.total else 0.0

    @classmethod
    def from_results(cls, results: Mapping[str, EvaluationResult]) -> "HistoryStatistics":
        entries = list(results.values())
        approved = sum(1 for entry in entries if entry.approved)
        average = (
            sum(entry.weighted_score for entry in entries) / len(entries)
            if entries
            else 0.0
        )
        return cls(
            total=len(entries),
            approved=approved,
            rejected=len(entries) - approved,
            average_score=average,
        )
