"""CLI entry point for the task API test harness."""

import argparse
import asyncio
import logging
import sys

from task_api_harness.models.result import RunSummary
from task_api_harness.probe import DEFAULT_BASE_URL, HttpProbe, ProbeConfig
from task_api_harness.reporter import print_report
from task_api_harness.runner import TestRunner
from task_api_harness.scenarios import build_suite
from task_api_harness.suite import CaseContext, Suite


async def run_suite(config: ProbeConfig, suite: Suite) -> RunSummary:
    """Run the suite against the service described by ``config``."""
    log = logging.getLogger("task_api_harness")
    log.info("Testing task API at %s", config.base_url)

    async with HttpProbe.from_config(config) as probe:
        runner = TestRunner(context=CaseContext.for_probe(probe))
        return await runner.run(suite)


async def run(config: ProbeConfig) -> int:
    """Run the task API suite, print the report and return exit code."""
    summary = await run_suite(config, build_suite())
    print_report(summary)
    return 1 if summary.failed > 0 else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run integration tests against the task API"
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Base URL of the service under test (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every request",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = ProbeConfig(base_url=args.base_url, timeout=args.timeout)
    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":  # pragma: no cover
    main()
