"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class CriterionOverride(BaseModel):
    weight: float | None = Field(default=None, ge=0)
    threshold: float | None = Field(default=None, ge=0, le=100)


class ApprovalConfig(BaseModel):
    min_weighted_score: float | None = Field(default=None, ge=0, le=100)
    critical_criteria: list[str] | None = None


class AppConfig(BaseModel):
    criteria: dict[str, CriterionOverride] = Field(default_factory=dict)
    approval: ApprovalConfig = Field(default_factory=ApprovalConfig)
    evaluator_address: str | None = None

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        criteria = {
            name: override.model_dump(exclude_none=True)
            for name, override in self.criteria.items()
        }
        if criteria:
            settings["criteria"] = criteria
        approval = self.approval.model_dump(exclude_none=True)
        if approval:
            settings["approval"] = approval
        if self.evaluator_address:
            settings["evaluator_address"] = self.evaluator_address
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
