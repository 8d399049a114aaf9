"""Sample submissions exercising the full evaluation flow."""

from __future__ import annotations

from typing import Callable

from .core import BountyEvaluator
from .schemas import EvaluationResult, ReviewRequest

DEMO_EVALUATOR_ADDRESS = "zkml-demo-evaluator-001"

DEMO_REQUESTS: dict[str, ReviewRequest] = {
    "High-Quality Submission": ReviewRequest(
        bounty_id="bounty-high-001",
        submission_content="""
      This is a high-quality submission demonstrating excellent code quality
      and comprehensive implementation.

      # Implementation Details
      - Complete authentication system with security audit
      - Performance benchmarks showing 95% efficiency improvement
      - Comprehensive documentation and API reference
      - Security vulnerability assessment and fixes
      - Unit tests with 99% code coverage
      - Performance optimization techniques applied

      The code follows best practices and industry standards.
    """,
        deliverables=[
            "Authentication System - Complete",
            "Database Layer - Optimized",
            "API Documentation - Full",
            "Security Audit Report",
            "Performance Benchmarks",
            "Unit Test Suite",
        ],
    ),
    "Medium-Quality Submission": ReviewRequest(
        bounty_id="bounty-medium-001",
        submission_content="""
      This submission includes the requested features with basic documentation.

      Features Implemented:
      - User authentication module
      - Data persistence layer
      - Basic API endpoints

      Documentation is available in README.md
    """,
        deliverables=["Authentication Module", "Database Layer", "API Endpoints"],
    ),
    "Low-Quality Submission": ReviewRequest(
        bounty_id="bounty-low-001",
        submission_content="""
      Quick implementation of the requested features.
      Code is functional but needs review.
    """,
        deliverables=["Basic implementation"],
    ),
}


def run_demo(
    evaluator: BountyEvaluator,
    echo: Callable[[str], None],
    *,
    evaluator_address: str = DEMO_EVALUATOR_ADDRESS,
) -> dict[str, EvaluationResult]:
    """Evaluate the sample submissions and print reports and statistics."""
    separator = "=" * 60
    results: dict[str, EvaluationResult] = {}

    for name, request in DEMO_REQUESTS.items():
        echo(f"\nEvaluating {name}...\n")
        result = evaluator.evaluate(request, evaluator_address)
        results[name] = result
        echo(evaluator.audit_report(result))

    echo(f"\n{separator}\nVerifying proofs...\n")
    for name, result in results.items():
        status = "VALID" if evaluator.verify(result) else "INVALID"
        echo(f"{name}: {status}")

    stats = evaluator.statistics()
    echo(f"\n{separator}\nEvaluation statistics\n")
    echo(f"Total Evaluations: {stats.total}")
    echo(f"Approved: {stats.approved} ({stats.approval_rate:.1f}%)")
    echo(f"Rejected: {stats.rejected} ({stats.rejection_rate:.1f}%)")
    echo(f"Average Score: {stats.average_score:.2f}/100")
    return results
