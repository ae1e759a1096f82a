"""MD Reader – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    AppConfig,
    CommandRouter,
    DialogUnavailableError,
    FileAccessError,
    FileSessionService,
    SessionStore,
)

try:
    __version__ = metadata.version("mdreader-py")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
