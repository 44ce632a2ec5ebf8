#
# src/extel/formatter.py
#
"""
Renders test results as human-readable report lines.
"""
import click

from extel.outcome import Fail, Outcome
from extel.protocols import Parameterized, Single, TestResult

OK_LABEL = "ok"
FAILED_LABEL = "FAILED"


def format_header(suite_name: str) -> str:
    return f"[{suite_name}]\n"


def _format_outcome(label: str, name: str, outcome: Outcome, colored: bool) -> str:
    if isinstance(outcome, Fail):
        status = click.style(FAILED_LABEL, fg="red") if colored else FAILED_LABEL
        return f"Test #{label} ({name}) ... {status}\n  [x] {outcome.message}\n"
    status = click.style(OK_LABEL, fg="green") if colored else OK_LABEL
    return f"Test #{label} ({name}) ... {status}\n"


def format_result(result: TestResult, ordinal: int, colored: bool = False) -> str:
    """
    Format one test result.

    Args:
        result: The result to render.
        ordinal: 1-based position of the test in its suite.
        colored: Wrap the status word in ANSI color codes.

    Parameterized reports get one line per outcome, numbered
    `<ordinal>.<index>` with a 1-based index for passing and failing
    outcomes alike.
    """
    report = result.report
    if isinstance(report, Single):
        return _format_outcome(str(ordinal), result.name, report.outcome, colored)
    if isinstance(report, Parameterized):
        return "".join(
            _format_outcome(f"{ordinal}.{index}", result.name, outcome, colored)
            for index, outcome in enumerate(report.outcomes, start=1)
        )
    raise TypeError(f"Unsupported report type: {type(report).__name__}")

# 🔼⚙️
