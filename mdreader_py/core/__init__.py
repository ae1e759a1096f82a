"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .app_config import AppConfig
from .commands import AsyncCommandRunner, CommandRouter
from .errors import (
    CommandArgumentError,
    DialogUnavailableError,
    FileAccessError,
    MdReaderError,
    UnknownCommandError,
)
from .file_session import FileSessionService
from .session import SessionSnapshot, SessionStore

__all__ = [
    "AppConfig",
    "AsyncCommandRunner",
    "CommandArgumentError",
    "CommandRouter",
    "DialogUnavailableError",
    "FileAccessError",
    "FileSessionService",
    "MdReaderError",
    "SessionSnapshot",
    "SessionStore",
    "UnknownCommandError",
]
