"""File session manager: one active markdown file and its last-seen mtime."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .app_config import AppConfig
from .errors import FileAccessError
from .session import SessionSnapshot, SessionStore

_LOG = logging.getLogger(__name__)


def stat_mtime(path: str) -> int | None:
    """Return the modification time in nanoseconds, or None if stat fails."""
    try:
        return os.stat(path).st_mtime_ns
    except (OSError, ValueError):
        return None


def read_text(path: str, encoding: str) -> str:
    """Read the whole file, keeping line endings as stored."""
    with open(path, encoding=encoding, newline="") as handle:
        return handle.read()


def is_markdown_path(candidate: str, extensions: Iterable[str]) -> bool:
    """Check the extension against ``extensions`` (case-sensitive)."""
    suffix = Path(candidate).suffix
    if not suffix.startswith("."):
        return False
    return suffix[1:] in set(extensions)


@dataclass(frozen=True, slots=True)
class FileSessionCallbacks:
    """Filesystem primitives used by the session manager."""

    read_text: Callable[[str, str], str] = read_text
    stat_mtime: Callable[[str], int | None] = stat_mtime
    exists: Callable[[str], bool] = os.path.exists


@dataclass(frozen=True, slots=True)
class FileSessionService:
    """Answer session commands against an injected `SessionStore`."""

    store: SessionStore
    config: AppConfig = field(default_factory=AppConfig)
    callbacks: FileSessionCallbacks = field(default_factory=FileSessionCallbacks)

    def load_startup_file(self, candidate: str | None) -> bool:
        """Record ``candidate`` as the active path if it is an existing markdown file.

        The timestamp stays empty until the first read. Rejected candidates
        leave the session untouched and are not reported as errors.
        """
        if not candidate:
            return False
        if not is_markdown_path(candidate, self.config.markdown_extensions):
            _LOG.debug("ignoring startup argument %r: not a markdown file", candidate)
            return False
        if not self.callbacks.exists(candidate):
            _LOG.debug("ignoring startup argument %r: path does not exist", candidate)
            return False
        self.store.replace(SessionSnapshot(active_path=candidate))
        return True

    def read_file(self, path: str) -> str:
        """Return the file contents and make ``path`` the active file."""
        path = os.fspath(path)
        try:
            content = self.callbacks.read_text(path, self.config.text_encoding)
        except (OSError, ValueError) as exc:
            raise FileAccessError(path=path, original=exc) from exc
        modified = self.callbacks.stat_mtime(path)
        self.store.replace(
            SessionSnapshot(active_path=path, last_known_modified=modified)
        )
        _LOG.debug("read %s (%d chars, mtime=%s)", path, len(content), modified)
        return content

    def check_file_changed(self) -> bool:
        """Compare the active file's current mtime with the stored one."""
        current = self.store.snapshot()
        if current.active_path is None or current.last_known_modified is None:
            return False
        modified = self.callbacks.stat_mtime(current.active_path)
        if modified is None:
            # Deleted or unreadable files report "unchanged".
            _LOG.debug("stat failed for %s; reporting unchanged", current.active_path)
            return False
        return modified != current.last_known_modified

    def dismiss_file_change(self) -> None:
        """Accept the file's current mtime without re-reading it."""
        path = self.store.snapshot().active_path
        if path is None:
            return
        modified = self.callbacks.stat_mtime(path)
        if modified is None:
            _LOG.debug("stat failed for %s; keeping stored mtime", path)
            return
        if not self.store.update_modified(path=path, modified=modified):
            _LOG.debug("active file changed during dismiss; %s dropped", path)

    def get_initial_file(self) -> str | None:
        return self.store.snapshot().active_path
