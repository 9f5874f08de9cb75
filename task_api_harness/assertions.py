"""Assertion helpers used inside test case bodies."""

from task_api_harness.errors import AssertionFailure


def assert_true(condition: object, message: str) -> None:
    """Raise AssertionFailure unless condition is truthy.

    The failure unwinds the current test case, so no later statement of the
    case runs after the first failed assertion.
    """
    if not condition:
        raise AssertionFailure(f"Expected [true] but got [false] - {message}")
