"""Human-readable audit report rendering."""

from __future__ import annotations

import pendulum

from ..schemas import CRITERION_LABELS, EvaluationResult

_REPORT_TEMPLATE = """
BOUNTY EVALUATION AUDIT REPORT
================================
Bounty ID: {bounty_id}
Timestamp: {timestamp}
Status: {status}
Weighted Score: {weighted_score:.2f}/100

SCORES:
-------
{scores}

ZERO-KNOWLEDGE PROOF:
--------------------
Commitment: {commitment}
Proof: {proof}

This evaluation was conducted using zero-knowledge machine learning (zkML)
to ensure objective, tamper-proof, and auditable results. The proof can be
independently verified without revealing the underlying scoring logic.
"""


def render_audit_report(evaluation: EvaluationResult) -> str:
    scores = "\n".join(
        f"{label}: {_format_score(evaluation.scores.get(name, 0))}/100"
        for name, label in CRITERION_LABELS.items()
    )
    return _REPORT_TEMPLATE.format(
        bounty_id=evaluation.bounty_id,
        timestamp=format_timestamp(evaluation.timestamp),
        status="APPROVED" if evaluation.approved else "REJECTED",
        weighted_score=evaluation.weighted_score,
        scores=scores,
        commitment=evaluation.circuit_output.commitment,
        proof=evaluation.zk_proof,
    ).strip()


def format_timestamp(epoch_ms: int) -> str:
    """Render epoch milliseconds as ISO-8601 UTC with millisecond precision."""
    moment = pendulum.from_timestamp(epoch_ms // 1000, tz="UTC")
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{epoch_ms % 1000:03d}Z"


def _format_score(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
