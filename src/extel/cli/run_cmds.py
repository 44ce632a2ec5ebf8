# src/extel/cli/run_cmds.py

import importlib
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import click
import structlog

from extel.cli.utils import logging_options, setup_logging_from_context
from extel.config import FileOutput, NoOutput, RunConfig, StdoutOutput
from extel.exceptions import ExtelError, SuiteLoadError
from extel.suite import Suite, make_suite, summarize
from extel.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

DEFAULT_ATTRIBUTE = "suite"


def load_suite(target: str) -> Suite:
    """
    Import a suite from a `module:attribute` reference.

    The attribute may be a `Suite` or a sequence of tests, in which case the
    suite is named after the attribute. Without `:attribute` the module's
    `suite` attribute is used. The current directory is importable only for
    the duration of the import.

    Raises:
        SuiteLoadError: If the module fails to import or the attribute
            cannot be turned into a suite.
    """
    module_name, _, attribute = target.partition(":")
    attribute = attribute or DEFAULT_ATTRIBUTE
    if not module_name:
        raise SuiteLoadError(f"Invalid suite reference '{target}': expected 'module:attribute'")

    cwd = os.getcwd()
    added_cwd = cwd not in sys.path
    if added_cwd:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SuiteLoadError(f"Could not import module '{module_name}': {e}") from e
    except Exception as e:
        raise SuiteLoadError(f"Module '{module_name}' failed during import: {type(e).__name__}: {e}") from e
    finally:
        if added_cwd and cwd in sys.path:
            sys.path.remove(cwd)

    try:
        obj = getattr(module, attribute)
    except AttributeError as e:
        raise SuiteLoadError(f"Module '{module_name}' has no attribute '{attribute}'") from e

    if isinstance(obj, Suite):
        return obj
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        try:
            return make_suite(attribute, obj)
        except Exception as e:
            raise SuiteLoadError(f"'{target}' holds an item that is not a test: {e}") from e
    raise SuiteLoadError(
        f"'{target}' is a {type(obj).__name__}, expected a Suite or a sequence of tests"
    )


@click.command(name="run")
@click.argument("target")
@click.option(
    "-o",
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="EXTEL_OUTPUT",
    show_envvar=True,
    help="Write the report to a file instead of stdout.",
)
@click.option("-q", "--quiet", is_flag=True, default=False, help="Run without writing a report.")
@click.option(
    "--color/--no-color",
    default=True,
    envvar="EXTEL_COLOR",
    show_default=True,
    help="Wrap result labels in ANSI color codes.",
)
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    target: str,
    output_file: Path | None,
    quiet: bool,
    color: bool,
    **kwargs,
):
    """Run the suite at TARGET (module:attribute) and report its results."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'run' command", target=target)

    if quiet and output_file:
        raise click.UsageError("--quiet and --output-file cannot be combined.")

    if quiet:
        output = NoOutput()
    elif output_file:
        output = FileOutput(output_file)
    else:
        output = StdoutOutput()
    config = RunConfig(output=output, colored=color)

    try:
        suite = load_suite(target)
        results = suite.run(config)
    except ExtelError as e:
        log.error("Suite could not be run", target=target, error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)

    summary = summarize(results)
    click.echo(
        f"{summary.total} outcome(s): {summary.passed} passed, {summary.failed} failed",
        err=True,
    )
    if not summary.ok:
        ctx.exit(1)
