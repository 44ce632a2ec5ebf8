#
# tests/unit/test_cli.py
#
"""
Comprehensive tests for CLI functionality.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from extel.cli.main import cli
from extel.cli.run_cmds import load_suite
from extel.exceptions import SuiteLoadError
from extel.suite import Suite

MIXED_SUITE = """
    from extel import check, fail, make_suite, parameters, pass_

    def always_succeed():
        return pass_()

    def always_fail():
        return fail("this test failed?")

    @parameters(1, -2)
    def non_negative(x):
        return check(x >= 0, f"{x} < 0")

    suite = make_suite("MixedSuite", [always_succeed, always_fail, non_negative])
"""

PASSING_TESTS = """
    from extel import pass_

    def only_pass():
        return pass_()

    tests = [only_pass]
"""


class TestMainCLI:
    """Test main CLI entry point."""

    def test_cli_help(self) -> None:
        """Test CLI help output."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "extel" in result.output.lower()
        assert "run" in result.output

    def test_cli_version(self) -> None:
        """Test CLI version output."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "version" in result.output

    def test_global_log_level_option(self) -> None:
        """Test global log level option."""
        runner = CliRunner()

        result = runner.invoke(cli, ["--log-level", "DEBUG", "run", "--help"])
        assert result.exit_code == 0

        result = runner.invoke(cli, ["--log-level", "INVALID", "run", "--help"])
        assert result.exit_code != 0


class TestRunCommand:
    """Test the run command."""

    def test_run_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["run", "--help"])

        assert result.exit_code == 0
        assert "module:attribute" in result.output

    def test_run_reports_and_fails_on_failures(self, suite_module) -> None:
        name = suite_module("cli_mixed_suite", MIXED_SUITE)
        runner = CliRunner()
        result = runner.invoke(cli, ["run", f"{name}:suite", "--no-color"])

        assert result.exit_code == 1
        assert result.stdout == (
            "[MixedSuite]\n"
            "Test #1 (always_succeed) ... ok\n"
            "Test #2 (always_fail) ... FAILED\n"
            "  [x] this test failed?\n"
            "Test #3.1 (non_negative) ... ok\n"
            "Test #3.2 (non_negative) ... FAILED\n"
            "  [x] -2 < 0\n"
        )

    def test_run_passing_test_list(self, suite_module) -> None:
        name = suite_module("cli_passing_tests", PASSING_TESTS)
        runner = CliRunner()
        result = runner.invoke(cli, ["run", f"{name}:tests", "--no-color"])

        assert result.exit_code == 0
        assert result.stdout.startswith("[tests]\nTest #1 (only_pass) ... ok\n")

    def test_run_to_output_file(self, suite_module, tmp_path: Path) -> None:
        name = suite_module("cli_file_suite", MIXED_SUITE)
        report = tmp_path / "report.txt"
        runner = CliRunner()
        result = runner.invoke(cli, ["run", f"{name}:suite", "-o", str(report), "--no-color"])

        assert result.exit_code == 1
        assert "[MixedSuite]" not in result.stdout
        assert report.read_text().startswith("[MixedSuite]\n")

    def test_run_quiet(self, suite_module) -> None:
        name = suite_module("cli_quiet_suite", PASSING_TESTS)
        runner = CliRunner()
        result = runner.invoke(cli, ["run", f"{name}:tests", "--quiet"])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_quiet_and_output_file_conflict(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["run", "x:y", "-q", "-o", str(tmp_path / "r.txt")])

        assert result.exit_code == 2

    def test_color_from_env_var(self, suite_module) -> None:
        name = suite_module("cli_env_suite", PASSING_TESTS)
        runner = CliRunner()

        with patch.dict("os.environ", {"EXTEL_COLOR": "false"}):
            result = runner.invoke(cli, ["run", f"{name}:tests"])
        assert "\x1b[" not in result.stdout

        result = runner.invoke(cli, ["run", f"{name}:tests", "--color"])
        assert "\x1b[32mok\x1b[0m" in result.stdout

    def test_run_missing_module(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["run", "extel_no_such_module:suite"])

        assert result.exit_code == 2

    def test_run_module_raising_at_import(self, suite_module) -> None:
        name = suite_module("cli_broken_import", "raise RuntimeError('boom at import')\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["run", name])

        assert result.exit_code == 2
        assert "boom at import" in result.stderr

    def test_run_test_list_with_non_test_item(self, suite_module) -> None:
        name = suite_module("cli_bad_item", "tests = [42]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["run", f"{name}:tests"])

        assert result.exit_code == 2
        assert "not a test" in result.stderr


class TestLoadSuite:
    """Resolving module:attribute references."""

    def test_default_attribute(self, suite_module) -> None:
        name = suite_module("load_default_suite", MIXED_SUITE)
        suite = load_suite(name)
        assert isinstance(suite, Suite)
        assert suite.name == "MixedSuite"

    def test_missing_attribute(self, suite_module) -> None:
        name = suite_module("load_missing_attr", PASSING_TESTS)
        with pytest.raises(SuiteLoadError, match="no attribute"):
            load_suite(f"{name}:suite")

    def test_wrong_type(self, suite_module) -> None:
        name = suite_module("load_wrong_type", "suite = 42\n")
        with pytest.raises(SuiteLoadError, match="expected a Suite"):
            load_suite(name)

    def test_empty_module_name(self) -> None:
        with pytest.raises(SuiteLoadError):
            load_suite(":suite")

    def test_working_directory_not_left_on_sys_path(
        self, suite_module, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        name = suite_module("load_restores_path", PASSING_TESTS)
        workdir = tmp_path / "workdir"
        workdir.mkdir()
        monkeypatch.chdir(workdir)

        load_suite(f"{name}:tests")
        assert str(workdir) not in sys.path

    def test_syntax_error_in_module(self, suite_module) -> None:
        name = suite_module("load_syntax_error", "def broken(:\n")
        with pytest.raises(SuiteLoadError, match="SyntaxError"):
            load_suite(name)
