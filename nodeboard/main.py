"""Command line entry point for the node dashboard."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nodeboard.constants.defaults import LOG_FILE_DEFAULT
from nodeboard.constants.enums import ThemeMode
from nodeboard.constants.limits import PAGE_SIZE_OPTIONS
from nodeboard.constants.values import APP_NAME

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Browse, search and sort network participant nodes in the terminal.",
    )
    parser.add_argument("--url", help="Nodes endpoint URL (overrides settings)")
    parser.add_argument(
        "--page-size",
        type=int,
        choices=PAGE_SIZE_OPTIONS,
        help="Rows per page",
    )
    parser.add_argument(
        "--theme",
        choices=[mode.value for mode in ThemeMode],
        help="Color theme for this session",
    )
    parser.add_argument("--config", type=Path, help="Settings file location")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=LOG_FILE_DEFAULT,
        help=f"Log file (default: {LOG_FILE_DEFAULT})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    return parser


def configure_logging(log_file: Path, level: str) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as exc:
        print(f"Cannot open log file {args.log_file}: {exc}", file=sys.stderr)
        return 1

    from nodeboard.app import NodeBoardApp

    logger.info("Starting %s", APP_NAME)
    app = NodeBoardApp(
        endpoint_url=args.url,
        page_size=args.page_size,
        theme=args.theme,
        config_path=args.config,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
