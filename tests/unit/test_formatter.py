#
# tests/unit/test_formatter.py
#
"""
Tests for report formatting.
"""

import pytest

from extel.formatter import format_header, format_result
from extel.outcome import Fail, Success
from extel.protocols import Parameterized, Single, TestResult

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


@pytest.fixture
def ok_result() -> TestResult:
    return TestResult(name="this_test_passes", report=Single(Success()))


@pytest.fixture
def fail_result() -> TestResult:
    return TestResult(
        name="this_test_fails",
        report=Single(Fail("test failed after this_test_passes")),
    )


class TestSingleReports:
    """Single-outcome formatting with and without color."""

    def test_success_plain(self, ok_result: TestResult) -> None:
        assert format_result(ok_result, 1, colored=False) == "Test #1 (this_test_passes) ... ok\n"

    def test_failure_plain(self, fail_result: TestResult) -> None:
        assert format_result(fail_result, 2, colored=False) == (
            "Test #2 (this_test_fails) ... FAILED\n  [x] test failed after this_test_passes\n"
        )

    def test_success_colored(self, ok_result: TestResult) -> None:
        assert format_result(ok_result, 1, colored=True) == (
            f"Test #1 (this_test_passes) ... {GREEN}ok{RESET}\n"
        )

    def test_failure_colored(self, fail_result: TestResult) -> None:
        assert format_result(fail_result, 2, colored=True) == (
            f"Test #2 (this_test_fails) ... {RED}FAILED{RESET}\n"
            "  [x] test failed after this_test_passes\n"
        )

    def test_plain_output_has_no_escape_codes(self, ok_result, fail_result) -> None:
        text = format_result(ok_result, 1) + format_result(fail_result, 2)
        assert "\x1b" not in text


class TestParameterizedReports:
    """One line per outcome with 1-based sub-indices."""

    def test_sub_indices_are_one_based_for_both_kinds(self) -> None:
        result = TestResult(
            name="perfect_sqrt",
            report=Parameterized([Success(), Success(), Fail("30 is not a perfect square")]),
        )
        assert format_result(result, 3, colored=False) == (
            "Test #3.1 (perfect_sqrt) ... ok\n"
            "Test #3.2 (perfect_sqrt) ... ok\n"
            "Test #3.3 (perfect_sqrt) ... FAILED\n"
            "  [x] 30 is not a perfect square\n"
        )

    def test_empty_parameterized_report_renders_nothing(self) -> None:
        result = TestResult(name="nothing", report=Parameterized([]))
        assert format_result(result, 1, colored=False) == ""


def test_header() -> None:
    assert format_header("EchoSuite") == "[EchoSuite]\n"
