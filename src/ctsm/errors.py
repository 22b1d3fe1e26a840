"""Exception types raised by the ctsm command line tool."""

from __future__ import annotations


class CtsmError(RuntimeError):
    """Base class for failures the tool detects and reports itself."""

    exit_code = 1

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class UsageError(CtsmError):
    """Raised when the invocation cannot be turned into a project."""


class FlagError(UsageError):
    """Raised when a flag is missing, has the wrong type, or an invalid value."""


class Aborted(CtsmError):
    """Raised when the operator declines the confirmation prompt."""

    def __init__(self) -> None:
        super().__init__("")


class CommandError(CtsmError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, argv: list[str], returncode: int, output: str = "") -> None:
        message = f"Command failed ({returncode}): {' '.join(argv)}"
        if output.strip():
            message = f"{message}\n\n{output.rstrip()}"
        super().__init__(message)
        self.argv = argv
        self.returncode = returncode
        self.output = output
