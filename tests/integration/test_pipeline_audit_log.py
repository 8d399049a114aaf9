from __future__ import annotations

import json
from pathlib import Path

import structlog

from bountyreview.container import create_container
from bountyreview.logging import review_context
from bountyreview.pipeline import AuditLogger, RequestLoader, ReviewPipeline


def test_pipeline_writes_audit_log(tmp_path: Path) -> None:
    requests_path = tmp_path / "requests.jsonl"
    output_path = tmp_path / "results.json"
    audit_path = tmp_path / "audit.jsonl"

    records = [
        {
            "bountyId": "B-audit",
            "submissionContent": "API documentation with benchmark results and security review",
            "deliverables": ["one", "two", "three", "four"],
        },
        {"bountyId": "B-missing"},
        "not json",
    ]
    requests_path.write_text(
        "\n".join(
            item if isinstance(item, str) else json.dumps(item) for item in records
        ),
        encoding="utf-8",
    )

    container = create_container()
    pipeline = container.pipeline()

    results = pipeline.run(
        requests_path=requests_path,
        output_path=output_path,
        evaluator_address="auditor-1",
        audit_logger=AuditLogger(audit_path),
    )

    assert [item["bountyId"] for item in results] == ["B-audit"]

    metadata = json.loads(output_path.read_text(encoding="utf-8"))["metadata"]
    assert len(metadata["errors"]) == 2
    assert "missing required fields: submissionContent" in metadata["errors"][0]

    audit_lines = audit_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(audit_lines) == 1
    entry = json.loads(audit_lines[0])
    assert entry["bounty_id"] == "B-audit"
    assert entry["evaluator_address"] == "auditor-1"
    assert entry["verified"] is True
    assert entry["audit_report"].startswith("BOUNTY EVALUATION AUDIT REPORT")

    stored = container.evaluator().history()
    assert "B-audit" in stored


def test_request_loader_accepts_snake_case(tmp_path: Path) -> None:
    path = tmp_path / "requests.jsonl"
    path.write_text(
        json.dumps({"bounty_id": "B-1", "submission_content": "text", "metrics": {"security": 90}})
        + "\n\n",
        encoding="utf-8",
    )

    requests = RequestLoader().load(path)

    assert requests[0].bounty_id == "B-1"
    assert requests[0].metrics == {"security": 90}


class ContextRecordingLoader(RequestLoader):
    def __init__(self) -> None:
        self.seen: dict = {}

    def load(self, path: Path):
        self.seen = structlog.contextvars.get_contextvars()
        return super().load(path)


def test_pipeline_binds_evaluator_address_to_log_context(tmp_path: Path) -> None:
    requests_path = tmp_path / "requests.jsonl"
    requests_path.write_text(
        json.dumps({"bountyId": "B-ctx", "submissionContent": "text"}),
        encoding="utf-8",
    )
    loader = ContextRecordingLoader()
    pipeline = ReviewPipeline(
        evaluator=create_container().evaluator(),
        request_loader=loader,
    )

    pipeline.run(
        requests_path=requests_path,
        output_path=tmp_path / "results.json",
        evaluator_address="auditor-ctx",
    )

    assert loader.seen["evaluator_address"] == "auditor-ctx"
    assert loader.seen["requests_path"] == str(requests_path)
    assert "evaluator_address" not in structlog.contextvars.get_contextvars()


def test_review_context_merges_into_rendered_log_lines() -> None:
    event = {"event": "evaluation.result"}
    with review_context("auditor-9", bounty_id="B-9"):
        merged = structlog.contextvars.merge_contextvars(None, "info", event)

    assert merged["evaluator_address"] == "auditor-9"
    assert merged["bounty_id"] == "B-9"
