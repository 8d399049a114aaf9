"""Criterion definitions and the immutable criteria set."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CRITERION_NAMES: tuple[str, ...] = (
    "code_quality",
    "completeness",
    "documentation",
    "performance",
    "security",
)

CRITERION_LABELS: dict[str, str] = {
    "code_quality": "Code Quality",
    "completeness": "Completeness",
    "documentation": "Documentation",
    "performance": "Performance",
    "security": "Security",
}

_CAMEL_ALIASES: dict[str, str] = {to_camel(name): name for name in CRITERION_NAMES}


def canonical_name(name: str) -> str:
    """Map the camelCase spelling of a criterion (``codeQuality``) to its key."""
    return _CAMEL_ALIASES.get(name, name)


def normalize_scores(scores: Mapping[str, float]) -> dict[str, float]:
    return {canonical_name(name): value for name, value in scores.items()}


def wire_name(name: str) -> str:
    return to_camel(name) if name in CRITERION_NAMES else name


class Criterion(BaseModel):
    """Weight and minimum qualifying score for one scoring dimension."""

    weight: float = Field(ge=0)
    threshold: float = Field(ge=0, le=100)

    model_config = ConfigDict(extra="forbid", frozen=True)


class CriteriaSet(Mapping[str, Criterion]):
    """Read-only mapping of criterion name to :class:`Criterion`."""

    def __init__(self, criteria: Mapping[str, Criterion]) -> None:
        self._criteria = MappingProxyType(dict(criteria))

    def criterion(self, name: str) -> Criterion | None:
        return self._criteria.get(canonical_name(name))

    def names(self) -> list[str]:
        return list(self._criteria)

    def __getitem__(self, name: str) -> Criterion:
        return self._criteria[canonical_name(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._criteria)

    def __len__(self) -> int:
        return len(self._criteria)

    def __repr__(self) -> str:
        return f"CriteriaSet({dict(self._criteria)!r})"
