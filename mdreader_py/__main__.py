"""CLI / GUI entry-point for MD Reader."""
from __future__ import annotations

import argparse
import logging
from importlib import metadata

from mdreader_py.core import app_config
from mdreader_py.core.log_setup import setup_logging

_LOG = logging.getLogger("mdreader_py.main")


def _version() -> str:
    try:
        return metadata.version("mdreader-py")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdreader-py",
        description="Open the MD Reader viewer, optionally with a markdown file.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="markdown file to open (.md or .markdown)",
    )
    parser.add_argument(
        "--poll-interval-ms",
        default=None,
        help="how often to check the open file for external changes",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="text encoding used to read files (default: utf-8)",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args, extra = build_parser().parse_known_args(argv)
    setup_logging(args.debug)
    if extra:
        _LOG.debug("ignoring extra startup arguments: %s", extra)
    cfg = app_config.from_options(
        poll_interval_ms=args.poll_interval_ms,
        encoding=args.encoding,
    )
    # Deferred so `--help`/`--version` work without a Qt platform plugin.
    from mdreader_py.gui import launch

    return launch(args.file, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
