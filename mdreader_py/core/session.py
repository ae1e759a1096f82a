"""In-memory record of the active file, guarded by one lock."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Active path plus the mtime observed at the last read or dismiss."""

    active_path: str | None = None
    last_known_modified: int | None = None


EMPTY_SESSION = SessionSnapshot()


class SessionStore:
    """Hold one `SessionSnapshot` and swap it atomically.

    Callers never hold the lock across I/O: they take a snapshot, do their
    filesystem work, then publish a new snapshot.
    """

    def __init__(self, initial: SessionSnapshot = EMPTY_SESSION) -> None:
        self._lock = threading.Lock()
        self._snapshot = initial

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot

    def replace(self, snapshot: SessionSnapshot) -> SessionSnapshot:
        """Publish ``snapshot`` and return the one it replaced."""
        if snapshot.active_path is None and snapshot.last_known_modified is not None:
            raise ValueError("last_known_modified requires an active path")
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot
            return previous

    def update_modified(self, *, path: str, modified: int) -> bool:
        """Store ``modified`` only if ``path`` is still the active path."""
        with self._lock:
            if self._snapshot.active_path != path:
                return False
            self._snapshot = SessionSnapshot(path, modified)
            return True
