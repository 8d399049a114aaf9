"""Batch review pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError as PydanticValidationError

from .core import BountyEvaluator
from .logging import review_context
from .schemas import EvaluationResult, ReviewRequest
from . import __version__


class RequestLoadError(ValueError):
    """Raised when request loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[ReviewRequest]):
        super().__init__("Request loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Request loading failed: {self.errors}"


class RequestLoader:
    """Load review requests from JSON Lines."""

    REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
        ("bountyId", "bounty_id"),
        ("submissionContent", "submission_content"),
    )

    def load(self, path: Path) -> list[ReviewRequest]:
        requests: list[ReviewRequest] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                missing = [
                    camel
                    for camel, snake in self.REQUIRED_FIELDS
                    if not (record.get(camel) or record.get(snake))
                ]
                if missing:
                    errors.append(
                        f"line {idx}: missing required fields: {', '.join(missing)}"
                    )
                    continue
                try:
                    requests.append(ReviewRequest.model_validate(record))
                except PydanticValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise RequestLoadError(errors, requests)
        return requests


class OutputWriter:
    """Persist evaluation results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class ReviewPipeline:
    """Evaluate a file of review requests end to end."""

    def __init__(
        self,
        *,
        evaluator: BountyEvaluator,
        request_loader: RequestLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._requests = request_loader or RequestLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        requests_path: Path,
        output_path: Path,
        evaluator_address: str,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        with review_context(evaluator_address, requests_path=str(requests_path)):
            return self._run(
                requests_path=requests_path,
                output_path=output_path,
                evaluator_address=evaluator_address,
                audit_logger=audit_logger,
            )

    def _run(
        self,
        *,
        requests_path: Path,
        output_path: Path,
        evaluator_address: str,
        audit_logger: AuditLogger | None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            requests = self._requests.load(requests_path)
        except RequestLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("requests.partial_load", errors=exc.errors)

        serialized_results: list[dict] = []

        for request in requests:
            result = self._evaluator.evaluate(request, evaluator_address)
            serialized_results.append(result.to_wire())

            if audit_logger:
                audit_logger.append(self._audit_record(result, evaluator_address))

            self._logger.info(
                "evaluation.result",
                bounty_id=result.bounty_id,
                approved=result.approved,
                weighted_score=result.weighted_score,
                commitment=result.circuit_output.commitment,
            )

        metadata = {
            "evaluator_address": evaluator_address,
            "request_count": len(requests),
            "errors": load_errors,
            "statistics": asdict(self._evaluator.statistics()),
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(
            output_path,
            {"metadata": metadata, "results": serialized_results},
        )
        return serialized_results

    def _audit_record(self, result: EvaluationResult, evaluator_address: str) -> dict:
        return {
            "bounty_id": result.bounty_id,
            "evaluator_address": evaluator_address,
            "weighted_score": result.weighted_score,
            "approved": result.approved,
            "commitment": result.circuit_output.commitment,
            "proof": result.zk_proof,
            "verified": self._evaluator.verify(result),
            "audit_report": self._evaluator.audit_report(result),
        }
