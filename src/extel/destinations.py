#
# src/extel/destinations.py
#
"""
Writable sinks the report is streamed to, and scoped acquisition of them.
"""
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO, Protocol, runtime_checkable

import structlog

from extel.config.models import BufferOutput, FileOutput, NoOutput, OutputDest, StdoutOutput
from extel.exceptions import OutputDestinationError

log = structlog.get_logger("destinations")


@runtime_checkable
class Sink(Protocol):
    """Something report bytes can be written to."""

    active: bool

    def write(self, data: bytes) -> None: ...

    def flush(self) -> None: ...


class NullSink:
    """Discards everything. Used when a run has no destination."""

    active = False

    def write(self, data: bytes) -> None:
        pass

    def flush(self) -> None:
        pass


class StreamSink:
    """Writes to a binary stream the caller keeps ownership of."""

    active = True

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def write(self, data: bytes) -> None:
        self._stream.write(data)

    def flush(self) -> None:
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()


class BytearraySink:
    """Appends to a caller-owned bytearray."""

    active = True

    def __init__(self, buffer: bytearray):
        self._buffer = buffer

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    def flush(self) -> None:
        pass


class StdoutSink:
    """Writes to the current `sys.stdout`, through its byte buffer when it has one."""

    active = True

    def write(self, data: bytes) -> None:
        stream = sys.stdout
        raw = getattr(stream, "buffer", None)
        if raw is None:
            stream.write(data.decode("utf-8", errors="replace"))
            return
        # Text already queued on the wrapper must reach the buffer first.
        stream.flush()
        raw.write(data)

    def flush(self) -> None:
        sys.stdout.flush()


@contextmanager
def open_destination(output: OutputDest) -> Iterator[Sink]:
    """
    Acquire the sink for `output` for the duration of a run.

    The sink is flushed, and a file sink closed, on every exit path.

    Raises:
        OutputDestinationError: If an output file cannot be opened.
    """
    if isinstance(output, NoOutput):
        yield NullSink()
        return

    if isinstance(output, FileOutput):
        try:
            handle = open(output.path, "wb")
        except OSError as e:
            log.error("Could not open output file", path=str(output.path), error=str(e))
            raise OutputDestinationError("could not open output file", path=str(output.path), details=e) from e
        log.debug("Opened output file", path=str(output.path))
        with handle:
            sink = StreamSink(handle)
            try:
                yield sink
            finally:
                sink.flush()
        return

    if isinstance(output, BufferOutput):
        buffer = output.buffer
        sink = BytearraySink(buffer) if isinstance(buffer, bytearray) else StreamSink(buffer)
    elif isinstance(output, StdoutOutput):
        sink = StdoutSink()
    else:
        raise TypeError(f"Unsupported output destination: {type(output).__name__}")

    try:
        yield sink
    finally:
        sink.flush()

# 🔼⚙️
