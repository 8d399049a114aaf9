from __future__ import annotations

import pytest

from bountyreview.core.history import HistoryStatistics, HistoryStore, InMemoryHistoryStore
from bountyreview.schemas import CircuitOutput, EvaluationResult


def build_result(bounty_id: str, *, approved: bool, weighted_score: float) -> EvaluationResult:
    return EvaluationResult(
        bounty_id=bounty_id,
        scores={"security": 80},
        weighted_score=weighted_score,
        zk_proof="0x" + "1" * 64,
        circuit_output=CircuitOutput(
            commitment="f" * 64,
            public_inputs=("f" * 64, str(weighted_score)),
            private_inputs=("{}",),
            proof="0x" + "1" * 64,
        ),
        approved=approved,
        timestamp=1_700_000_000_000,
    )


def test_in_memory_store_satisfies_protocol():
    assert isinstance(InMemoryHistoryStore(), HistoryStore)


def test_upsert_replaces_existing_entry():
    store = InMemoryHistoryStore()
    store.upsert(build_result("B-1", approved=False, weighted_score=40))
    store.upsert(build_result("B-1", approved=True, weighted_score=80))

    assert len(store) == 1
    assert store.get("B-1").approved is True


def test_view_is_live_and_read_only():
    store = InMemoryHistoryStore()
    view = store.view()
    store.upsert(build_result("B-2", approved=True, weighted_score=70))

    assert "B-2" in view
    with pytest.raises(TypeError):
        view["B-3"] = build_result("B-3", approved=True, weighted_score=70)


def test_statistics_over_results():
    store = InMemoryHistoryStore()
    store.upsert(build_result("B-1", approved=True, weighted_score=80))
    store.upsert(build_result("B-2", approved=False, weighted_score=20))
    store.upsert(build_result("B-3", approved=True, weighted_score=70))

    stats = HistoryStatistics.from_results(store.view())

    assert stats.total == 3
    assert stats.approved == 2
    assert stats.rejected == 1
    assert stats.average_score == pytest.approx(170 / 3)
    assert stats.approval_rate == pytest.approx(200 / 3)


def test_statistics_when_empty():
    stats = HistoryStatistics.from_results({})

    assert stats.total == 0
    assert stats.average_score == 0.0
    assert stats.approval_rate == 0.0
