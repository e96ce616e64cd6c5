"""Error taxonomy for the todo CLI."""
from __future__ import annotations


class TodoError(RuntimeError):
    """Base class for every todo failure."""


class UsageError(TodoError):
    """Command line could not be acted on; usage is printed."""


class MissingCommand(UsageError):
    def __init__(self) -> None:
        super().__init__("no command given")


class MissingArgs(UsageError):
    def __init__(self, command: str) -> None:
        super().__init__(f"{command} requires at least one argument")
        self.command = command


class InvalidCommand(UsageError):
    def __init__(self, command: str) -> None:
        super().__init__(f"unknown command {command!r}")
        self.command = command


class FatalError(TodoError):
    """Unrecoverable condition; the process aborts with a diagnostic."""


class ConfigurationError(FatalError):
    """Environment does not allow locating the data directory."""


class StorageError(FatalError):
    """Raised when reading or writing the todo file fails."""


class IndexOutOfRangeError(FatalError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"index {index} is out of range for a list of {length} entries"
        )
        self.index = index
        self.length = length
