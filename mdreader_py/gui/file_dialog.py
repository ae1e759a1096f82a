"""Native open-file dialog restricted to markdown and all-files filters."""

from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtWidgets import QApplication, QFileDialog, QWidget

from mdreader_py.core.app_config import AppConfig
from mdreader_py.core.errors import DialogUnavailableError


def build_name_filters(filters: Iterable[tuple[str, tuple[str, ...]]]) -> str:
    """Render ``(label, extensions)`` pairs as a Qt name-filter string."""
    parts: list[str] = []
    for label, extensions in filters:
        patterns = " ".join("*" if ext == "*" else f"*.{ext}" for ext in extensions)
        parts.append(f"{label} ({patterns})")
    return ";;".join(parts)


class FileDialogProvider:
    """Callable that asks the user for one file and returns its path."""

    def __init__(
        self, config: AppConfig | None = None, parent: QWidget | None = None
    ) -> None:
        self._config = config or AppConfig()
        self._parent = parent

    def set_parent(self, parent: QWidget | None) -> None:
        self._parent = parent

    def __call__(self) -> str | None:
        app = QApplication.instance()
        if not isinstance(app, QApplication):
            raise DialogUnavailableError("no QApplication is running")
        path, _selected = QFileDialog.getOpenFileName(
            self._parent,
            "Open Markdown File",
            "",
            build_name_filters(self._config.dialog_filters),
        )
        return path or None
