"""Human-readable report of a suite run."""

import sys
from typing import TextIO

from task_api_harness.models.result import RunSummary, TestOutcome


def format_outcome(index: int, outcome: TestOutcome) -> str:
    """Format one outcome line, ``index`` being 1-based."""
    if outcome.passed:
        status = "PASSED"
    else:
        status = f"FAILED - {outcome.message}"
    return f"{index}: {outcome.name} : {status} ({outcome.duration:.2f}s)"


def format_summary(summary: RunSummary) -> str:
    line = f"Executed a total of {summary.total} tests {summary.passed} PASSED"
    if summary.failed > 0:
        line += f" but {summary.failed} FAILED"
    return line


def print_report(summary: RunSummary, file: TextIO | None = None) -> None:
    """Print one line per outcome followed by the summary line."""
    out = file if file is not None else sys.stdout
    for index, outcome in enumerate(summary.outcomes, start=1):
        print(format_outcome(index, outcome), file=out)
    print(format_summary(summary), file=out)
