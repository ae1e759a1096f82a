"""Named command dispatch between the front-end and the session manager."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any

from .errors import CommandArgumentError, UnknownCommandError
from .file_session import FileSessionService

_LOG = logging.getLogger(__name__)

CMD_READ_FILE = "read_file"
CMD_GET_INITIAL_FILE = "get_initial_file"
CMD_OPEN_FILE_DIALOG = "open_file_dialog"
CMD_CHECK_FILE_CHANGED = "check_file_changed"
CMD_DISMISS_FILE_CHANGE = "dismiss_file_change"

COMMAND_NAMES = (
    CMD_READ_FILE,
    CMD_GET_INITIAL_FILE,
    CMD_OPEN_FILE_DIALOG,
    CMD_CHECK_FILE_CHANGED,
    CMD_DISMISS_FILE_CHANGE,
)

# Native dialogs can only be shown from the GUI thread.
MAIN_THREAD_COMMANDS = frozenset({CMD_OPEN_FILE_DIALOG})

Handler = Callable[..., Any]


class CommandRouter:
    """Map command names to handlers and invoke them with keyword arguments."""

    def __init__(
        self,
        service: FileSessionService,
        pick_file: Callable[[], str | None],
    ) -> None:
        self._service = service
        self._handlers: dict[str, Handler] = {
            CMD_READ_FILE: service.read_file,
            CMD_GET_INITIAL_FILE: service.get_initial_file,
            CMD_OPEN_FILE_DIALOG: pick_file,
            CMD_CHECK_FILE_CHANGED: service.check_file_changed,
            CMD_DISMISS_FILE_CHANGE: service.dismiss_file_change,
        }

    @property
    def service(self) -> FileSessionService:
        return self._service

    def names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def invoke(self, name: str, args: Mapping[str, Any] | None = None) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        kwargs = dict(args or {})
        _bind_arguments(name, handler, kwargs)
        _LOG.debug("invoke %s %s", name, kwargs)
        return handler(**kwargs)


def _bind_arguments(name: str, handler: Handler, kwargs: dict[str, Any]) -> None:
    try:
        inspect.signature(handler).bind(**kwargs)
    except TypeError as exc:
        raise CommandArgumentError(f"{name}: {exc}") from exc


class AsyncCommandRunner:
    """Run blocking commands on an executor and hand back futures."""

    def __init__(
        self,
        router: CommandRouter,
        *,
        executor: Executor | None = None,
        max_workers: int = 2,
    ) -> None:
        self._router = router
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max(1, max_workers),
            thread_name_prefix="mdreader-cmd",
        )

    @property
    def router(self) -> CommandRouter:
        return self._router

    def submit(self, name: str, args: Mapping[str, Any] | None = None) -> Future:
        if name in MAIN_THREAD_COMMANDS:
            raise CommandArgumentError(f"{name} must run on the GUI thread")
        if name not in self._router.names():
            raise UnknownCommandError(name)
        return self._executor.submit(self._router.invoke, name, dict(args or {}))

    def shutdown(self, *, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
