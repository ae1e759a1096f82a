"""Exception types raised across the command boundary."""

from __future__ import annotations


class MdReaderError(Exception):
    """Base class for MD Reader errors."""


class FileAccessError(MdReaderError):
    """Reading a requested file failed."""

    def __init__(self, *, path: str, original: Exception) -> None:
        super().__init__(f"Failed to read file: {original}")
        self.path = path
        self.original = original


class DialogUnavailableError(MdReaderError):
    """The host cannot present a native file dialog."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"File dialog unavailable: {reason}")
        self.reason = reason


class UnknownCommandError(MdReaderError, LookupError):
    """No handler is registered under the requested command name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


class CommandArgumentError(MdReaderError, ValueError):
    """Arguments do not match what the command accepts."""
