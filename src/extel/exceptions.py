#
# src/extel/exceptions.py
#
"""
Custom exceptions for extel.
"""


class ExtelError(Exception):
    """Base class for all extel errors."""

    pass


class TestFailed(ExtelError):
    """
    The one domain-level failure kind. Raised from inside a test body to
    short-circuit it; the engine turns it into a failing outcome.
    """

    __test__ = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCommandError(ExtelError):
    """Raised when a command template cannot be turned into an invocation."""

    def __init__(self, template: str):
        self.template = template
        super().__init__(f"no command was provided in template {template!r}")


class OutputDestinationError(ExtelError):
    """Raised when the report destination cannot be acquired."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: Exception | None = None,
    ):
        self.path = path
        self.details = details
        full_message = message
        if path:
            full_message += f" (Path: '{path}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class SuiteLoadError(ExtelError):
    """Raised when a suite cannot be located or imported by the CLI."""

    pass

# 🔼⚙️
