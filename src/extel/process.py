#
# src/extel/process.py
#
"""
Hands an invocation to a subprocess and captures what it produced.
"""
import subprocess
from collections.abc import Mapping
from pathlib import Path

import structlog
from attrs import define

from extel.command import Invocation
from extel.outcome import Fail, Outcome, Success

log = structlog.get_logger("process")


@define(frozen=True, slots=True)
class CommandOutput:
    """
    Captured result of running an invocation. `exit_code` is None when the
    platform reports no code for the process.
    """

    exit_code: int | None
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def stdout_text(self) -> str:
        """Decode stdout as UTF-8. Raises `UnicodeDecodeError` on partial UTF-8."""
        return self.stdout.decode("utf-8")

    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8")

    def stdout_lossy(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    def stderr_lossy(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def spawn(
    invocation: Invocation,
    *,
    cwd: Path | str | None = None,
    input: bytes | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandOutput:
    """
    Run the invocation to completion and capture stdout and stderr.

    Raises:
        OSError: If the program cannot be started (e.g. not found).
    """
    spawn_log = log.bind(command=" ".join(invocation.argv), cwd=str(cwd) if cwd else None)
    spawn_log.debug("Spawning command")

    try:
        completed = subprocess.run(
            invocation.argv,
            input=input,
            capture_output=True,
            cwd=cwd,
            env=env,
            check=False,
        )
    except FileNotFoundError:
        spawn_log.error("Command not found", command_executable=invocation.program)
        raise

    spawn_log.debug(
        "Command finished",
        exit_code=completed.returncode,
        stdout_len=len(completed.stdout),
        stderr_len=len(completed.stderr),
    )
    return CommandOutput(
        exit_code=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


def expect_exit_code(output: CommandOutput, expected: int = 0) -> Outcome:
    """Check a command's exit code, failing when it is missing or unexpected."""
    code = output.exit_code
    if code is None:
        return Fail("no exit code found")
    if code < 0:
        return Fail(f"terminated by signal {-code}")
    if code != expected:
        return Fail(f"failed with exit code: {code}")
    return Success()

# 🔼⚙️
