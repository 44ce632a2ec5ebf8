#
# src/extel/outcome.py
#
"""
The outcome model: what a single test invocation produced.

A test body returns `pass_()`, `fail(...)` or `check(...)`, or raises. Raised
exceptions are converted into a `Fail` carrying a rendered message so that a
failing test never aborts the surrounding suite.
"""
import ast
import inspect
import itertools
import linecache
from types import FrameType
from typing import TypeAlias

import structlog
from attrs import define, field

from extel.exceptions import TestFailed

log = structlog.get_logger("outcome")

DEFAULT_CONDITION_SOURCE = "condition"


@define(frozen=True, slots=True)
class Success:
    """A passing outcome. Carries no payload."""

    @property
    def is_success(self) -> bool:
        return True


@define(frozen=True, slots=True)
class Fail:
    """A failing outcome with a fully rendered message."""

    message: str = field(converter=str)

    @property
    def is_success(self) -> bool:
        return False


Outcome: TypeAlias = Success | Fail


def pass_() -> Success:
    return Success()


def fail(message: str) -> Fail:
    return Fail(message)


def check(condition: bool, message: str | None = None, *, source: str | None = None) -> Outcome:
    """
    Turn a condition into an outcome.

    Args:
        condition: The value to test for truthiness.
        message: Failure message. When omitted, a default of the form
            "[<source>] assertion failed" is generated.
        source: Text of the condition used for the default message. When
            omitted it is read from the caller's source line.
    """
    if condition:
        return Success()
    if message is not None:
        return Fail(message)
    if source is None:
        source = _condition_source(inspect.currentframe().f_back) or DEFAULT_CONDITION_SOURCE
    return Fail(f"[{source}] assertion failed")


def _condition_source(frame: FrameType | None) -> str | None:
    """Recover the text of the first argument of the `check(...)` call running in `frame`."""
    if frame is None:
        return None
    code = frame.f_code

    # The position of the executing CALL instruction spans exactly this call,
    # even when a line holds several.
    position = next(itertools.islice(code.co_positions(), frame.f_lasti // 2, None), None)
    if position is not None and None not in position:
        lineno, end_lineno, col, end_col = position
        text = _source_span(code.co_filename, lineno, end_lineno, col, end_col)
        if text:
            try:
                call = ast.parse(text, mode="eval").body
            except SyntaxError:
                call = None
            if isinstance(call, ast.Call) and call.args:
                return ast.get_source_segment(text, call.args[0])
    return _single_check_on_line(code.co_filename, frame.f_lineno)


def _source_span(filename: str, lineno: int, end_lineno: int, col: int, end_col: int) -> str | None:
    """Slice a source range; columns are UTF-8 byte offsets."""
    lines = [linecache.getline(filename, n).encode("utf-8") for n in range(lineno, end_lineno + 1)]
    if not lines or not lines[0]:
        return None
    lines[-1] = lines[-1][:end_col]
    lines[0] = lines[0][col:]
    return b"".join(lines).decode("utf-8", errors="replace")


def _single_check_on_line(filename: str, lineno: int) -> str | None:
    """Fallback: the condition of the only `check(...)` call on a line."""
    line = linecache.getline(filename, lineno).strip()
    if not line:
        return None

    # Compound statement headers such as `if check(x):` need a body to parse.
    for candidate in (line, f"{line} pass"):
        try:
            tree = ast.parse(candidate)
        except SyntaxError:
            continue
        calls = [
            node
            for node in ast.walk(tree)
            if isinstance(node, ast.Call)
            and node.args
            and (node.func.id if isinstance(node.func, ast.Name) else getattr(node.func, "attr", None)) == "check"
        ]
        if len(calls) != 1:
            return None
        return ast.get_source_segment(candidate, calls[0].args[0])
    return None


def err(message: str) -> TestFailed:
    """
    Build a `TestFailed` for re-raising an error the engine does not render
    on its own, e.g. `raise err(f"lookup failed: {e}") from e`.
    """
    return TestFailed(message)


def render_exception(exc: Exception) -> str:
    """Render an exception raised inside a test body as a failure message."""
    if isinstance(exc, TestFailed):
        return exc.message
    if isinstance(exc, AssertionError):
        return str(exc) or "assertion failed"
    if isinstance(exc, UnicodeError):
        return f"invalid conversion from UTF-8 occurred: {exc}"
    if isinstance(exc, OSError):
        return f"an I/O error occurred: {exc}"
    return f"{type(exc).__name__}: {exc}"


def outcome_from_exception(exc: Exception) -> Fail:
    message = render_exception(exc)
    log.debug("Test body raised", error_type=type(exc).__name__, message=message)
    return Fail(message)


def as_outcome(value: object) -> Outcome:
    """Normalize what a test body returned into an outcome."""
    if value is None:
        return Success()
    if isinstance(value, Success | Fail):
        return value
    return Fail(f"test returned {type(value).__name__}, expected an Outcome")


def invoke_guarded(func, *args) -> Outcome:
    """Call a test body, converting any raised `Exception` into a `Fail`."""
    try:
        value = func(*args)
    except Exception as e:
        return outcome_from_exception(e)
    return as_outcome(value)

# 🔼⚙️
