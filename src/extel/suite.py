#
# src/extel/suite.py
#
"""
The suite execution engine.

A suite is an ordered list of named tests. Running it invokes every test in
registration order, streams each formatted result to the configured
destination as soon as it is known, and returns the collected results.
"""
from collections.abc import Callable, Iterable, Sequence

import structlog
from attrs import define, field

from extel.config.models import RunConfig
from extel.destinations import open_destination
from extel.formatter import format_header, format_result
from extel.protocols import Invocable, TestEntry, TestResult
from extel.telemetry import StructLogger

log: StructLogger = structlog.get_logger("suite")

DEFAULT_SUITE_NAME = "extel"

TestSpec = (
    TestEntry
    | Invocable
    | tuple[str, Invocable | Callable[[], object]]
    | Callable[[], object]
)


def as_entry(spec: TestSpec) -> TestEntry:
    """Normalize a registration item into a `TestEntry`."""
    if isinstance(spec, TestEntry):
        return spec
    if isinstance(spec, tuple):
        name, target = spec
        if isinstance(target, Invocable):
            return TestEntry.from_invocable(target, name)
        return TestEntry(name=name, func=target)
    if isinstance(spec, Invocable):
        return TestEntry.from_invocable(spec)
    if callable(spec):
        return TestEntry.from_callable(spec)
    raise TypeError(
        f"Cannot register {spec!r} as a test; expected a callable, an Invocable, "
        "a (name, test) pair or a TestEntry"
    )


@define(frozen=True, slots=True)
class RunSummary:
    """Outcome counts across a run. Parameterized tests count once per input."""
    total: int
    passed: int
    failed: int

    @property
    def ok(self) -> bool:
        return self.failed == 0


def summarize(results: Iterable[TestResult]) -> RunSummary:
    total = passed = 0
    for result in results:
        for outcome in result.outcomes:
            total += 1
            passed += outcome.is_success
    return RunSummary(total=total, passed=passed, failed=total - passed)


def run(
    entries: Iterable[TestSpec],
    config: RunConfig | None = None,
    *,
    name: str = DEFAULT_SUITE_NAME,
) -> list[TestResult]:
    """
    Run tests in order and stream their formatted results.

    Test failures are data: they end up in the returned results and never
    stop later tests from running.

    Args:
        entries: Tests in registration order.
        config: Output destination and color settings. Defaults to colored
            output on stdout.
        name: Suite identifier written in the header line.

    Returns:
        One `TestResult` per entry, in the same order.

    Raises:
        OutputDestinationError: If the destination cannot be acquired.
    """
    config = config or RunConfig()
    tests = [as_entry(entry) for entry in entries]
    run_log = log.bind(suite=name)
    run_log.info("Starting suite run", test_count=len(tests), output=type(config.output).__name__)

    results: list[TestResult] = []
    with open_destination(config.output) as sink:
        if sink.active:
            sink.write(format_header(name).encode("utf-8"))

        for ordinal, entry in enumerate(tests, start=1):
            run_log.debug("Running test", ordinal=ordinal, test=entry.name)
            result = TestResult(name=entry.name, report=entry.invoke())

            if sink.active:
                sink.write(format_result(result, ordinal, config.colored).encode("utf-8"))
                sink.flush()

            run_log.debug("Test finished", ordinal=ordinal, test=entry.name, passed=result.passed)
            results.append(result)

    summary = summarize(results)
    run_log.info(
        "Suite run complete",
        total=summary.total,
        passed=summary.passed,
        failed=summary.failed,
    )
    return results


@define(frozen=True, slots=True)
class Suite:
    """A named, ordered collection of tests that run together."""
    name: str
    entries: tuple[TestEntry, ...] = field(factory=tuple, converter=lambda items: tuple(as_entry(i) for i in items))

    def __len__(self) -> int:
        return len(self.entries)

    def run(self, config: RunConfig | None = None) -> list[TestResult]:
        return run(self.entries, config, name=self.name)


def make_suite(name: str, tests: Sequence[TestSpec] = ()) -> Suite:
    """
    Build a suite from tests in registration order.

    Example:
        suite = make_suite("EchoSuite", [echo_hello_world, echo_params])
        suite.run(RunConfig().with_colored(False))
    """
    return Suite(name=name, entries=tests)

# 🔼⚙️
