# src/extel/cli/utils.py

import logging

import click
import structlog

from extel.telemetry.logger import setup_logging as core_setup_logging
from extel.telemetry.logger.processors import level_number

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="EXTEL_LOG_LEVEL",
        help="Set the logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="EXTEL_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="EXTEL_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    obj = ctx.obj or {}
    log_level_str = local_log_level or obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else obj.get("JSON_LOGS", False)

    core_setup_logging(
        level=level_number(log_level_str),
        json_logs=use_json_logs,
        log_file=log_file_path,
        headless_mode=True,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )
