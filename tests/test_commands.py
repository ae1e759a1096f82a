"""Test module for command routing and the async command runner."""

from __future__ import annotations

from concurrent.futures import Future
from pathlib import Path

import pytest

from mdreader_py.core.commands import (
    COMMAND_NAMES,
    AsyncCommandRunner,
    CommandRouter,
)
from mdreader_py.core.errors import (
    CommandArgumentError,
    DialogUnavailableError,
    FileAccessError,
    UnknownCommandError,
)
from mdreader_py.core.file_session import FileSessionService
from mdreader_py.core.session import SessionStore


class _ImmediateExecutor:
    """Executor stub that runs work on the calling thread."""

    def __init__(self) -> None:
        self.submitted: list[str] = []

    def submit(self, fn, *args, **kwargs):  # type: ignore[no-untyped-def]
        self.submitted.append(args[0] if args else "")
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001
            future.set_exception(exc)
        return future

    def shutdown(self, wait: bool = True) -> None:
        raise AssertionError("runner must not shut down a borrowed executor")


def _router(pick_file=lambda: None) -> CommandRouter:  # type: ignore[no-untyped-def]
    return CommandRouter(FileSessionService(store=SessionStore()), pick_file)


def test_router_exposes_all_commands() -> None:
    """Verify the router registers every command name."""
    assert set(_router().names()) == set(COMMAND_NAMES)
    assert len(COMMAND_NAMES) == 5


def test_router_unknown_command() -> None:
    """Verify unknown names raise UnknownCommandError."""
    with pytest.raises(UnknownCommandError) as excinfo:
        _router().invoke("close_file")
    assert excinfo.value.name == "close_file"
    assert isinstance(excinfo.value, LookupError)


def test_router_validates_arguments() -> None:
    """Verify missing and unexpected arguments are rejected before dispatch."""
    router = _router()
    with pytest.raises(CommandArgumentError):
        router.invoke("read_file")
    with pytest.raises(CommandArgumentError):
        router.invoke("check_file_changed", {"path": "x.md"})
    assert router.service.get_initial_file() is None


def test_router_read_file_and_errors(markdown_file: Path, tmp_path: Path) -> None:
    """Verify read_file dispatch returns contents and propagates FileAccessError."""
    router = _router()
    assert router.invoke("read_file", {"path": str(markdown_file)}).startswith("#")
    assert router.invoke("get_initial_file") == str(markdown_file)
    with pytest.raises(FileAccessError):
        router.invoke("read_file", {"path": str(tmp_path / "nope.md")})
    assert router.invoke("get_initial_file") == str(markdown_file)


def test_router_dialog_passthrough() -> None:
    """Verify dialog results and failures pass through unchanged."""
    assert _router(lambda: "/docs/readme.md").invoke("open_file_dialog") == (
        "/docs/readme.md"
    )
    assert _router(lambda: None).invoke("open_file_dialog") is None

    def _broken() -> str | None:
        raise DialogUnavailableError("headless")

    with pytest.raises(DialogUnavailableError):
        _router(_broken).invoke("open_file_dialog")


def test_open_file_dialog_does_not_touch_session() -> None:
    """Verify picking a file leaves the session empty."""
    router = _router(lambda: "/docs/readme.md")
    router.invoke("open_file_dialog")
    assert router.invoke("get_initial_file") is None


def test_end_to_end_dialog_read_change_dismiss(tmp_path: Path, touch_mtime) -> None:
    """Verify the open → read → change → dismiss scenario."""
    doc = tmp_path / "docs" / "readme.md"
    doc.parent.mkdir()
    doc.write_text("# Readme\n", encoding="utf-8")
    router = _router(lambda: str(doc))

    assert router.invoke("get_initial_file") is None
    picked = router.invoke("open_file_dialog")
    assert picked == str(doc)
    assert router.invoke("read_file", {"path": picked}) == "# Readme\n"
    assert router.invoke("check_file_changed") is False

    touch_mtime(doc)
    assert router.invoke("check_file_changed") is True

    assert router.invoke("dismiss_file_change") is None
    assert router.invoke("check_file_changed") is False


def test_async_runner_uses_given_executor(markdown_file: Path) -> None:
    """Verify submitted commands run on the injected executor."""
    executor = _ImmediateExecutor()
    runner = AsyncCommandRunner(_router(), executor=executor)  # type: ignore[arg-type]
    future = runner.submit("read_file", {"path": str(markdown_file)})
    assert future.result().startswith("# Notes")
    assert runner.submit("check_file_changed").result() is False
    assert executor.submitted == ["read_file", "check_file_changed"]
    runner.shutdown()


def test_async_runner_carries_errors_in_future(tmp_path: Path) -> None:
    """Verify command failures surface when the future is resolved."""
    runner = AsyncCommandRunner(_router())
    try:
        future = runner.submit("read_file", {"path": str(tmp_path / "nope.md")})
        with pytest.raises(FileAccessError):
            future.result(timeout=5)
    finally:
        runner.shutdown()


def test_async_runner_thread_pool_round_trip(markdown_file: Path) -> None:
    """Verify the default thread pool executes commands."""
    runner = AsyncCommandRunner(_router(), max_workers=1)
    try:
        runner.submit("read_file", {"path": str(markdown_file)}).result(timeout=5)
        assert runner.submit("get_initial_file").result(timeout=5) == str(
            markdown_file
        )
    finally:
        runner.shutdown()


def test_async_runner_rejects_gui_thread_and_unknown_commands() -> None:
    """Verify dialogs and unknown commands are refused before submission."""
    executor = _ImmediateExecutor()
    runner = AsyncCommandRunner(_router(), executor=executor)  # type: ignore[arg-type]
    with pytest.raises(CommandArgumentError):
        runner.submit("open_file_dialog")
    with pytest.raises(UnknownCommandError):
        runner.submit("watch_file")
    assert executor.submitted == []
