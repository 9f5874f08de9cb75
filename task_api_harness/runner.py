"""Sequential test runner with per-case failure capture."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from task_api_harness.errors import HarnessFailure
from task_api_harness.models.result import RunSummary, TestOutcome
from task_api_harness.suite import CaseContext, Suite, TestCase

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestRunner:
    """Runs the cases of a suite one after another.

    A failing case never stops the run: every registered case produces
    exactly one outcome, in registration order.
    """

    __test__ = False

    context: CaseContext
    # Awaited before every case, e.g. to reset server state
    before_each: Callable[[], Awaitable[None]] | None = None

    async def run(self, suite: Suite) -> RunSummary:
        """Run every case of the suite and return their outcomes."""
        log.info("Running %d test case(s)...", len(suite))
        outcomes: list[TestOutcome] = []
        for case in suite.cases:
            outcome = await self._run_case(case)
            log.info(
                "Test completed: name=%s passed=%s duration=%.2fs",
                outcome.name,
                outcome.passed,
                outcome.duration,
            )
            outcomes.append(outcome)

        summary = RunSummary(outcomes=outcomes)
        log.info(
            "Test execution completed: total=%d passed=%d failed=%d",
            summary.total,
            summary.passed,
            summary.failed,
        )
        return summary

    async def _run_case(self, case: TestCase) -> TestOutcome:
        """Run one case inside a failure boundary."""
        started = time.monotonic()
        try:
            if self.before_each is not None:
                await self.before_each()
            await case.body(self.context)
        except HarnessFailure as failure:
            message = str(failure)
        except Exception as exc:
            log.error(
                "Test case %r raised unexpectedly: %s", case.name, exc, exc_info=exc
            )
            message = f"{type(exc).__name__}: {exc}"
        else:
            return TestOutcome(
                name=case.name, passed=True, duration=time.monotonic() - started
            )

        return TestOutcome(
            name=case.name,
            passed=False,
            message=message,
            duration=time.monotonic() - started,
        )
