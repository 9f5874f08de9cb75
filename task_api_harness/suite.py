"""Ordered collection of named test cases."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from task_api_harness.fixtures import FixtureBuilder
from task_api_harness.probe.client import HttpProbe


@dataclass(frozen=True, kw_only=True)
class CaseContext:
    """Collaborators handed to every test case body."""

    probe: HttpProbe
    fixtures: FixtureBuilder

    @classmethod
    def for_probe(cls, probe: HttpProbe) -> "CaseContext":
        return cls(probe=probe, fixtures=FixtureBuilder(probe=probe))


CaseBody: TypeAlias = Callable[[CaseContext], Awaitable[None]]


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A named test case body."""

    __test__ = False

    name: str
    body: CaseBody = field(repr=False)


@dataclass(kw_only=True)
class Suite:
    """Test cases in the order they were registered.

    Registration only collects cases; running them is up to ``TestRunner``.
    """

    _cases: list[TestCase] = field(default_factory=list)

    @property
    def cases(self) -> Sequence[TestCase]:
        return tuple(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def add(self, name: str, body: CaseBody) -> TestCase:
        """Register a test case at the end of the suite.

        Raises:
            ValueError: If a case with the same name is already registered

        """
        if any(case.name == name for case in self._cases):
            raise ValueError(f"Test case '{name}' is already registered")
        case = TestCase(name=name, body=body)
        self._cases.append(case)
        return case

    def test(self, name: str) -> Callable[[CaseBody], CaseBody]:
        """Register the decorated coroutine function as a test case."""

        def _register(body: CaseBody) -> CaseBody:
            self.add(name, body)
            return body

        return _register
