#
# src/extel/config/models.py
#
"""
Attrs-based models for configuring a suite run.
"""
from pathlib import Path
from typing import Any, TypeAlias

import attrs
from attrs import define, field


def _validate_bool(inst: Any, attr: Any, value: bool) -> None:
    """Validator ensures the value is a real bool."""
    if not isinstance(value, bool):
        raise ValueError(f"Field '{attr.name}' must be a bool, got {value!r}")


def _validate_writable_buffer(inst: Any, attr: Any, value: Any) -> None:
    """Validator ensures a buffer destination can take byte writes."""
    if not isinstance(value, bytearray) and not callable(getattr(value, "write", None)):
        raise ValueError(
            f"Field '{attr.name}' must be a bytearray or a binary stream with write(), "
            f"got {type(value).__name__}"
        )


# --- Output destinations ---
@define(frozen=True, slots=True)
class StdoutOutput:
    """Stream the report to standard output."""


@define(frozen=True, slots=True)
class FileOutput:
    """Stream the report to a file, created or truncated when the run starts."""
    path: Path = field(converter=Path)


@define(frozen=True, slots=True)
class BufferOutput:
    """Stream the report into a caller-owned bytearray or binary stream."""
    buffer: Any = field(validator=_validate_writable_buffer, eq=False)


@define(frozen=True, slots=True)
class NoOutput:
    """Run without streaming a report."""


OutputDest: TypeAlias = StdoutOutput | FileOutput | BufferOutput | NoOutput


@define(frozen=True, slots=True)
class RunConfig:
    """Options for a single suite run."""
    output: OutputDest = field(factory=StdoutOutput)
    colored: bool = field(default=True, validator=_validate_bool)

    def with_output(self, output: OutputDest) -> "RunConfig":
        """Return a copy streaming to `output`."""
        return attrs.evolve(self, output=output)

    def with_colored(self, colored: bool) -> "RunConfig":
        """Return a copy with ANSI colors switched on or off."""
        return attrs.evolve(self, colored=colored)

# 🔼⚙️
