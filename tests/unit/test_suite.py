"""Tests for suite registration."""

import pytest

from task_api_harness.suite import CaseContext, Suite


async def _noop(ctx: CaseContext) -> None:
    return None


async def _other(ctx: CaseContext) -> None:
    return None


def test_new_suite_is_empty() -> None:
    """Starts without cases."""
    suite = Suite()

    assert len(suite) == 0
    assert suite.cases == ()


def test_add_keeps_registration_order() -> None:
    """Cases are kept in the order they were added."""
    suite = Suite()
    suite.add("first", _noop)
    suite.add("second", _other)
    suite.add("third", _noop)

    assert [case.name for case in suite.cases] == ["first", "second", "third"]
    assert suite.cases[1].body is _other


def test_add_rejects_duplicate_name() -> None:
    """Raises ValueError when a name is registered twice."""
    suite = Suite()
    suite.add("creates a user", _noop)

    with pytest.raises(ValueError, match="already registered"):
        suite.add("creates a user", _other)

    assert len(suite) == 1


def test_decorator_registers_and_returns_body() -> None:
    """The test decorator registers the case and leaves the function usable."""
    suite = Suite()

    @suite.test("decorated case")
    async def body(ctx: CaseContext) -> None:
        return None

    assert [case.name for case in suite.cases] == ["decorated case"]
    assert suite.cases[0].body is body


def test_cases_are_a_snapshot() -> None:
    """Mutating the returned sequence does not change the suite."""
    suite = Suite()
    suite.add("only", _noop)

    cases = suite.cases
    suite.add("later", _noop)

    assert len(cases) == 1
    assert len(suite.cases) == 2
