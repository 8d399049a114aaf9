"""Default scoring criteria and override handling."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..schemas import CriteriaSet, Criterion
from .errors import ValidationError

DEFAULT_CRITERIA = CriteriaSet(
    {
        "code_quality": Criterion(weight=0.25, threshold=50),
        "completeness": Criterion(weight=0.25, threshold=60),
        "documentation": Criterion(weight=0.15, threshold=40),
        "performance": Criterion(weight=0.20, threshold=50),
        "security": Criterion(weight=0.15, threshold=60),
    }
)


def build_criteria(
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
    *,
    base: CriteriaSet = DEFAULT_CRITERIA,
) -> CriteriaSet:
    """Return a new criteria set with per-criterion overrides applied."""
    if not overrides:
        return base

    merged = dict(base)
    for name, fields in overrides.items():
        current = merged.get(name)
        if current is None:
            raise ValidationError(
                f"Unknown criterion: {name!r}",
                context={"known": list(base)},
            )
        try:
            merged[name] = Criterion.model_validate(
                {**current.model_dump(), **dict(fields)}
            )
        except PydanticValidationError as exc:
            raise ValidationError(
                f"Invalid override for criterion {name!r}",
                context={"errors": exc.errors()},
            ) from exc
    return CriteriaSet(merged)
