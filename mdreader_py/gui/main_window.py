from __future__ import annotations

from collections.abc import Callable, Mapping
from concurrent.futures import Future
from pathlib import Path
from typing import Any

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStackedWidget,
    QTextBrowser,
    QToolBar,
)

from mdreader_py.core.app_config import AppConfig
from mdreader_py.core.commands import (
    CMD_CHECK_FILE_CHANGED,
    CMD_DISMISS_FILE_CHANGE,
    CMD_GET_INITIAL_FILE,
    CMD_OPEN_FILE_DIALOG,
    CMD_READ_FILE,
    AsyncCommandRunner,
    CommandRouter,
)
from mdreader_py.core.errors import DialogUnavailableError, FileAccessError

_APP_TITLE = "MD Reader"
_EMPTY_HINT = (
    "<h2>MD Reader</h2>"
    "<p>Open a Markdown file to view its contents</p>"
    "<p><i>You can also pass a .md file on the command line</i></p>"
)
_FUTURE_POLL_MS = 25

_DoneCallback = Callable[[Future], None]


class MainWindow(QMainWindow):
    """Viewer window: open action, file name label, markdown pane."""

    def __init__(
        self,
        router: CommandRouter,
        runner: AsyncCommandRunner,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self._router = router
        self._runner = runner
        self._config = config or AppConfig()
        self._current_path: str | None = None
        self._pending: list[tuple[Future, _DoneCallback]] = []
        self._change_check_pending = False
        self._change_prompt_open = False
        self._reads_pending = 0
        self.setWindowTitle(_APP_TITLE)
        self.resize(900, 700)

        # ── toolbar ─────────────────────────────────────────────────────────
        self.act_open = QAction("&Open File…", self)
        self.act_open.setShortcut(QKeySequence.StandardKey.Open)
        self.act_open.triggered.connect(self._open_file)
        toolbar = QToolBar("Main", self)
        toolbar.setMovable(False)
        toolbar.addAction(self.act_open)
        self.file_label = QLabel("", self)
        self.file_label.setContentsMargins(8, 0, 0, 0)
        toolbar.addWidget(self.file_label)
        self.addToolBar(toolbar)

        # ── content ─────────────────────────────────────────────────────────
        self.stack = QStackedWidget(self)
        self.empty_state = QLabel(_EMPTY_HINT, self)
        self.empty_state.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.viewer = QTextBrowser(self)
        self.viewer.setOpenExternalLinks(True)
        self.stack.addWidget(self.empty_state)
        self.stack.addWidget(self.viewer)
        self.setCentralWidget(self.stack)

        # ── timers ──────────────────────────────────────────────────────────
        self._future_timer = QTimer(self)
        self._future_timer.setInterval(_FUTURE_POLL_MS)
        self._future_timer.timeout.connect(self._drain_pending)
        self._change_timer = QTimer(self)
        self._change_timer.setInterval(self._config.change_poll_ms)
        self._change_timer.timeout.connect(self.request_change_check)

        initial = self._router.invoke(CMD_GET_INITIAL_FILE)
        if initial:
            self.load_file(initial)

    @property
    def current_path(self) -> str | None:
        return self._current_path

    # ----------------------------------------------------------------- loading
    def load_file(self, path: str) -> None:
        self._reads_pending += 1
        self._submit(
            CMD_READ_FILE,
            {"path": path},
            lambda future: self._on_file_read(path, future),
        )

    def _on_file_read(self, path: str, future: Future) -> None:
        self._reads_pending -= 1
        try:
            content = future.result()
        except FileAccessError as exc:
            self._show_markdown(f"# Error\n\nFailed to load file: {exc}")
            if path == self._current_path:
                # Failed reload keeps the old session; acknowledge the new mtime.
                self._submit(
                    CMD_DISMISS_FILE_CHANGE, None, lambda done: done.result()
                )
            return
        self._current_path = path
        name = Path(path).name
        self.file_label.setText(name)
        self.setWindowTitle(f"{_APP_TITLE} – {name}")
        self._show_markdown(content)
        if not self._change_timer.isActive():
            self._change_timer.start()

    def _show_markdown(self, text: str) -> None:
        self.viewer.setMarkdown(text)
        self.stack.setCurrentWidget(self.viewer)

    def _open_file(self) -> None:
        try:
            path = self._router.invoke(CMD_OPEN_FILE_DIALOG)
        except DialogUnavailableError as exc:
            QMessageBox.warning(self, "Open failed", str(exc))
            return
        if path:
            self.load_file(path)

    # ---------------------------------------------------------- change checks
    def request_change_check(self) -> None:
        """Ask the backend whether the open file changed on disk."""
        if self._current_path is None:
            return
        if self._reads_pending or self._change_check_pending:
            return
        if self._change_prompt_open:
            return
        self._change_check_pending = True
        self._submit(CMD_CHECK_FILE_CHANGED, None, self._on_change_checked)

    def _on_change_checked(self, future: Future) -> None:
        self._change_check_pending = False
        if future.result():
            self._prompt_file_changed()

    def _prompt_file_changed(self) -> None:
        path = self._current_path
        if path is None:
            return
        self._change_prompt_open = True
        try:
            answer = QMessageBox.question(
                self,
                "File changed",
                f"{Path(path).name} was modified on disk.\n\nReload it?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                QMessageBox.StandardButton.Yes,
            )
        finally:
            self._change_prompt_open = False
        if answer == QMessageBox.StandardButton.Yes:
            self.load_file(path)
        else:
            self._submit(CMD_DISMISS_FILE_CHANGE, None, lambda future: future.result())

    def changeEvent(self, event: QEvent) -> None:  # noqa: N802
        super().changeEvent(event)
        if event.type() == QEvent.Type.ActivationChange and self.isActiveWindow():
            self.request_change_check()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._change_timer.stop()
        self._future_timer.stop()
        super().closeEvent(event)

    # ---------------------------------------------------------------- futures
    def _submit(
        self,
        name: str,
        args: Mapping[str, Any] | None,
        on_done: _DoneCallback,
    ) -> None:
        self._pending.append((self._runner.submit(name, args), on_done))
        self._drain_pending()

    def _drain_pending(self) -> None:
        finished: list[tuple[Future, _DoneCallback]] = []
        waiting: list[tuple[Future, _DoneCallback]] = []
        for item in self._pending:
            (finished if item[0].done() else waiting).append(item)
        self._pending = waiting
        for future, on_done in finished:
            on_done(future)
        if self._pending and not self._future_timer.isActive():
            self._future_timer.start()
        elif not self._pending:
            self._future_timer.stop()
