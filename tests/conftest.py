import logging
import textwrap
from pathlib import Path

import pytest
import structlog

from extel import fail, pass_
from extel.config import BufferOutput, RunConfig


@pytest.fixture(autouse=True)
def quiet_structlog():
    """Keep library logs out of captured stdout unless a test configures logging."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture
def output_buffer() -> bytearray:
    return bytearray()


@pytest.fixture
def buffer_config(output_buffer: bytearray) -> RunConfig:
    """A plain-text run configuration that streams into `output_buffer`."""
    return RunConfig(output=BufferOutput(output_buffer), colored=False)


def always_succeed():
    return pass_()


def always_fail():
    return fail("this test failed?")


@pytest.fixture
def basic_tests() -> list:
    return [always_succeed, always_fail]


@pytest.fixture
def suite_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Writes an importable module of tests and returns a factory for its name."""
    monkeypatch.syspath_prepend(str(tmp_path))

    def _write(name: str, source: str) -> str:
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source))
        return name

    return _write
