#
# src/extel/__init__.py
#
"""
Extel: a minimal test runner for stateless tests of external executables.

Tests are plain functions returning an outcome. Register them into a suite,
run it, and read the report:

    from extel import check, cmd, make_suite, parameters

    def echo_hello():
        output = cmd('echo -n "hello world"').output()
        return check(output.stdout_text() == "hello world")

    @parameters(1, 2, -2, 4)
    def non_negative(x):
        return check(x >= 0, f"{x} < 0")

    make_suite("Demo", [echo_hello, non_negative]).run()
"""
from .command import Invocation, cmd, tokenize
from .config import BufferOutput, FileOutput, NoOutput, RunConfig, StdoutOutput
from .exceptions import ExtelError, InvalidCommandError, OutputDestinationError, TestFailed
from .formatter import format_result
from .outcome import Fail, Outcome, Success, check, err, fail, pass_
from .parameterized import parameterize, parameters
from .process import CommandOutput, expect_exit_code, spawn
from .protocols import Parameterized, Report, Single, TestEntry, TestResult
from .suite import RunSummary, Suite, make_suite, run, summarize

__all__ = [
    "BufferOutput",
    "CommandOutput",
    "ExtelError",
    "Fail",
    "FileOutput",
    "InvalidCommandError",
    "Invocation",
    "NoOutput",
    "Outcome",
    "OutputDestinationError",
    "Parameterized",
    "Report",
    "RunConfig",
    "RunSummary",
    "Single",
    "StdoutOutput",
    "Success",
    "Suite",
    "TestEntry",
    "TestFailed",
    "TestResult",
    "check",
    "cmd",
    "err",
    "expect_exit_code",
    "fail",
    "format_result",
    "make_suite",
    "parameterize",
    "parameters",
    "pass_",
    "run",
    "spawn",
    "summarize",
    "tokenize",
]

# 🔼⚙️
