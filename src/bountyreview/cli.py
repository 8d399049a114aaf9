"""Typer CLI entrypoint for the review engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from .config import load_settings
from .container import ReviewContainer, create_container
from .core import ConfigurationError, ValidationError
from .demo import run_demo
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas import EvaluationResult

app = typer.Typer(help="Bounty submission review CLI.")


def _load_container(config: Optional[Path]) -> ReviewContainer:
    settings = {}
    if config:
        try:
            settings = load_settings(config)
        except ConfigurationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc
    container = create_container(settings=settings)
    try:
        container.approval_policy()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc
    return container


def _read_evaluation(path: Path) -> EvaluationResult:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(payload, dict) and "evaluation" in payload:
            payload = payload["evaluation"]
        return EvaluationResult.model_validate(payload)
    except (json.JSONDecodeError, PydanticValidationError) as exc:
        raise typer.BadParameter(f"Invalid evaluation object: {exc}", param_name="evaluation") from exc


@app.command()
def run(
    requests: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Review requests JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    evaluator_address: Optional[str] = typer.Option(None, help="Evaluator address bound into each commitment."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    json_logs: bool = typer.Option(True, "--json-logs/--console-logs", help="Render logs as JSON or plain console lines."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Evaluate every review request in a JSONL file."""
    container = _load_container(config)
    configure_logging(log_level, json_output=json_logs)

    pipeline = container.pipeline()
    address = evaluator_address or container.config.evaluator_address()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        requests_path=requests,
        output_path=output,
        evaluator_address=address,
        audit_logger=audit_logger,
    )
    typer.echo(f"Processed {len(results)} submissions. Results saved to {output}.")


@app.command()
def verify(
    evaluation: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Evaluation JSON path."),
) -> None:
    """Check the structure of a stored evaluation's circuit output."""
    result = _read_evaluation(evaluation)
    evaluator = create_container().evaluator()
    if evaluator.verify(result):
        typer.echo("VALID")
        return
    typer.echo("INVALID")
    raise typer.Exit(code=1)


@app.command()
def audit(
    evaluation: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Evaluation JSON path."),
) -> None:
    """Print the audit report for a stored evaluation."""
    result = _read_evaluation(evaluation)
    typer.echo(create_container().evaluator().audit_report(result))


@app.command()
def demo(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """Evaluate the bundled sample submissions."""
    container = _load_container(config)
    run_demo(container.evaluator(), typer.echo)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
