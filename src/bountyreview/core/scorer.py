"""Per-dimension scoring from supplied metrics or submission heuristics."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from pydantic.alias_generators import to_camel

from ..schemas import CRITERION_NAMES, ScoreSet

DOCUMENTATION_KEYWORDS: tuple[str, ...] = ("documentation", "readme", "api")
PERFORMANCE_KEYWORDS: tuple[str, ...] = ("performance", "benchmark", "optimization")
SECURITY_KEYWORDS: tuple[str, ...] = ("security", "audit", "vulnerability")


class HeuristicScorer:
    """Derive a score set for a submission.

    Caller-supplied metrics win when present. Otherwise scores are a
    deterministic function of the submission text and deliverable count.
    """

    def score(
        self,
        content: str,
        deliverables: Sequence[str],
        metrics: Mapping[str, float] | None = None,
    ) -> ScoreSet:
        if metrics:
            return self._from_metrics(metrics)
        return self._heuristic(content, deliverables)

    @staticmethod
    def _from_metrics(metrics: Mapping[str, float]) -> ScoreSet:
        scores: ScoreSet = {}
        for name in CRITERION_NAMES:
            value = metrics.get(name)
            if value is None:
                value = metrics.get(to_camel(name), 0)
            scores[name] = value
        return scores

    def _heuristic(self, content: str, deliverables: Sequence[str]) -> ScoreSet:
        text = content.lower()
        deliverable_count = len(deliverables)

        code_quality = min(
            100.0,
            (len(content) / 1000) * 50 + (30 if deliverable_count > 0 else 0),
        )
        completeness = min(100.0, deliverable_count * 20.0)
        documentation = 75.0 if _contains_any(text, DOCUMENTATION_KEYWORDS) else 40.0
        performance = 70.0 if _contains_any(text, PERFORMANCE_KEYWORDS) else 50.0
        security = 80.0 if _contains_any(text, SECURITY_KEYWORDS) else 45.0

        return {
            "code_quality": _round_half_up(code_quality),
            "completeness": _round_half_up(completeness),
            "documentation": _round_half_up(documentation),
            "performance": _round_half_up(performance),
            "security": _round_half_up(security),
        }


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _round_half_up(value: float) -> int:
    # round() would apply banker's rounding to .5 values
    return int(math.floor(value + 0.5))
