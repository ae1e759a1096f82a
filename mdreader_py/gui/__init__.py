from __future__ import annotations

import logging

from mdreader_py.core.app_config import AppConfig
from mdreader_py.core.commands import AsyncCommandRunner, CommandRouter
from mdreader_py.core.file_session import FileSessionService
from mdreader_py.core.session import SessionStore

from .app import get_app
from .file_dialog import FileDialogProvider
from .main_window import MainWindow

_LOG = logging.getLogger(__name__)


def launch(initial_file: str | None = None, config: AppConfig | None = None) -> int:
    cfg = config or AppConfig()
    service = FileSessionService(store=SessionStore(), config=cfg)
    if initial_file and not service.load_startup_file(initial_file):
        _LOG.info("startup file %s was not opened", initial_file)
    app = get_app()
    pick_file = FileDialogProvider(cfg)
    router = CommandRouter(service, pick_file)
    runner = AsyncCommandRunner(router, max_workers=cfg.worker_threads)
    try:
        win = MainWindow(router, runner, cfg)
        pick_file.set_parent(win)
        win.show()
        return app.exec()
    finally:
        runner.shutdown(wait=False)
