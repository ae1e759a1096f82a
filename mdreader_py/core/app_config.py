"""Application configuration resolved from command-line options."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Any

MARKDOWN_FILTER = ("Markdown", ("md", "markdown"))
ALL_FILES_FILTER = ("All Files", ("*",))

POLL_INTERVAL_MIN_MS = 100
POLL_INTERVAL_MAX_MS = 60_000


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Store effective runtime settings for the viewer."""

    markdown_extensions: tuple[str, ...] = ("md", "markdown")
    dialog_filters: tuple[tuple[str, tuple[str, ...]], ...] = (
        MARKDOWN_FILTER,
        ALL_FILES_FILTER,
    )
    text_encoding: str = "utf-8"
    change_poll_ms: int = 1000
    worker_threads: int = 2


def _normalize_poll_interval(value: Any, *, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return max(POLL_INTERVAL_MIN_MS, min(parsed, POLL_INTERVAL_MAX_MS))


def _normalize_encoding(value: Any, *, default: str) -> str:
    if value is None:
        return default
    name = str(value).strip()
    if not name:
        return default
    try:
        return codecs.lookup(name).name
    except LookupError:
        return default


def from_options(
    *,
    poll_interval_ms: Any = None,
    encoding: Any = None,
) -> AppConfig:
    """Build config from CLI values, keeping defaults for invalid input."""
    base = AppConfig()
    return AppConfig(
        markdown_extensions=base.markdown_extensions,
        dialog_filters=base.dialog_filters,
        text_encoding=_normalize_encoding(encoding, default=base.text_encoding),
        change_poll_ms=_normalize_poll_interval(
            poll_interval_ms, default=base.change_poll_ms
        ),
        worker_threads=base.worker_threads,
    )
