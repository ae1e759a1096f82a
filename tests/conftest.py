import os
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure Qt runs headless in CI/CLI environments without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture()
def markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nFirst draft.\n", encoding="utf-8")
    return path


def _shift_mtime(path: Path, delta_ns: int = 5_000_000_000) -> int:
    stat = path.stat()
    new_mtime = stat.st_mtime_ns + delta_ns
    os.utime(path, ns=(stat.st_atime_ns, new_mtime))
    return new_mtime


@pytest.fixture()
def touch_mtime() -> Callable[..., int]:
    """Move a file's mtime by a fixed offset, independent of clock resolution."""
    return _shift_mtime
