"""Dependency injection container for the review system."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    ApprovalPolicy,
    BountyEvaluator,
    EvaluationCircuit,
    HeuristicScorer,
    InMemoryHistoryStore,
    build_criteria,
)
from .pipeline import ReviewPipeline

DEFAULT_EVALUATOR_ADDRESS = "default-evaluator"


class ReviewContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    criteria = providers.Singleton(
        build_criteria,
        config.criteria,
    )

    scorer = providers.Singleton(HeuristicScorer)

    circuit = providers.Singleton(EvaluationCircuit, criteria)

    approval_policy = providers.Singleton(
        ApprovalPolicy,
        criteria,
        min_weighted_score=config.approval.min_weighted_score,
        critical_criteria=config.approval.critical_criteria,
    )

    history_store = providers.Singleton(InMemoryHistoryStore)

    evaluator = providers.Singleton(
        BountyEvaluator,
        scorer=scorer,
        circuit=circuit,
        policy=approval_policy,
        history=history_store,
    )

    pipeline = providers.Factory(
        ReviewPipeline,
        evaluator=evaluator,
    )


def create_container(*, settings: dict | None = None) -> ReviewContainer:
    """Instantiate container with optional overrides."""

    container = ReviewContainer()
    container.config.from_dict(
        {"evaluator_address": DEFAULT_EVALUATOR_ADDRESS, "approval": {}}
    )

    if not settings:
        return container

    if isinstance(settings, dict):
        container.config.from_dict(settings)

    return container
