#
# src/extel/protocols.py
#
"""
Defines the report types and the registration units a suite is built from.
"""
from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

from attrs import define, field

from extel.outcome import Outcome, Success, as_outcome, outcome_from_exception


@define(frozen=True, slots=True)
class Single:
    """Report of a zero-argument test: exactly one outcome."""

    outcome: Outcome

    @property
    def outcomes(self) -> tuple[Outcome, ...]:
        return (self.outcome,)


@define(frozen=True, slots=True)
class Parameterized:
    """
    Report of a test invoked once per input value. Outcome `k` belongs to
    input `k`; outcomes are never reordered or deduplicated.
    """

    outcomes: tuple[Outcome, ...] = field(converter=tuple)


Report: TypeAlias = Single | Parameterized


@runtime_checkable
class Invocable(Protocol):
    """
    Protocol for anything a suite can run.
    """

    def invoke(self) -> Report:
        """
        Runs the test and returns its report. Must not raise for ordinary
        test failures.
        """
        ...


@define(frozen=True, slots=True)
class TestEntry:
    """A named test registered into a suite."""

    __test__ = False

    name: str
    func: Callable[[], object] = field(repr=False)

    @classmethod
    def from_callable(cls, func: Callable[[], object], name: str | None = None) -> "TestEntry":
        return cls(name=name or getattr(func, "__name__", repr(func)), func=func)

    @classmethod
    def from_invocable(cls, target: Invocable, name: str | None = None) -> "TestEntry":
        """Register an object whose `invoke()` produces the report."""
        return cls(name=name or getattr(target, "name", None) or type(target).__name__, func=target.invoke)

    def invoke(self) -> Report:
        try:
            value = self.func()
        except Exception as e:
            return Single(outcome_from_exception(e))
        if isinstance(value, Single | Parameterized):
            return value
        return Single(as_outcome(value))


@define(frozen=True, slots=True)
class TestResult:
    """
    The name of a test paired with its report. Never mutated after a run.
    """

    __test__ = False

    name: str
    report: Report

    @property
    def outcomes(self) -> tuple[Outcome, ...]:
        return self.report.outcomes

    @property
    def passed(self) -> bool:
        return all(isinstance(o, Success) for o in self.outcomes)

# 🔼⚙️
