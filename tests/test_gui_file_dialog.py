"""Test module for the native file dialog provider."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from mdreader_py.core.app_config import AppConfig
from mdreader_py.core.errors import DialogUnavailableError
from mdreader_py.gui import file_dialog as fd


def test_build_name_filters_renders_markdown_and_all_files() -> None:
    """Verify filter pairs render as a Qt name-filter string."""
    assert fd.build_name_filters(AppConfig().dialog_filters) == (
        "Markdown (*.md *.markdown);;All Files (*)"
    )


def test_provider_returns_selected_path(qapp, monkeypatch) -> None:
    """Verify the chosen file path is returned with the configured filters."""
    seen: dict[str, object] = {}

    def _pick(parent, caption, directory, filters):  # type: ignore[no-untyped-def]
        seen.update(parent=parent, caption=caption, filters=filters)
        return "/docs/readme.md", "Markdown (*.md *.markdown)"

    monkeypatch.setattr(fd.QFileDialog, "getOpenFileName", staticmethod(_pick))
    provider = fd.FileDialogProvider()
    assert provider() == "/docs/readme.md"
    assert seen["parent"] is None
    assert seen["filters"] == "Markdown (*.md *.markdown);;All Files (*)"


def test_provider_returns_none_when_cancelled(qapp, monkeypatch) -> None:
    """Verify a cancelled dialog yields no path."""
    monkeypatch.setattr(
        fd.QFileDialog,
        "getOpenFileName",
        staticmethod(lambda *_args, **_kwargs: ("", "")),
    )
    assert fd.FileDialogProvider()() is None


def test_provider_raises_without_application(monkeypatch) -> None:
    """Verify a missing QApplication is reported as DialogUnavailableError."""

    class _NoApp:
        """QApplication stand-in whose instance lookup finds nothing."""

        @staticmethod
        def instance() -> None:
            return None

    monkeypatch.setattr(fd, "QApplication", _NoApp)
    with pytest.raises(DialogUnavailableError):
        fd.FileDialogProvider()()
