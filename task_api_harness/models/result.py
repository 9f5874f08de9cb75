"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Result of a single test case execution.

    ``message`` carries the failure text and is None for passed cases.
    """

    __test__ = False

    name: str
    passed: bool
    message: str | None = None
    duration: float = 0.0


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Outcomes of a suite run, in registration order."""

    outcomes: Sequence[TestOutcome]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed
