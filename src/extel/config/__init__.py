#
# config/__init__.py
#
"""
Run configuration sub-package for extel.
"""

from .models import (
    BufferOutput,
    FileOutput,
    NoOutput,
    OutputDest,  # The union of destination types
    RunConfig,
    StdoutOutput,
)

__all__ = [
    "BufferOutput",
    "FileOutput",
    "NoOutput",
    "OutputDest",
    "RunConfig",
    "StdoutOutput",
]

# 🔼⚙️
