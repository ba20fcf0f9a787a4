"""Smoke tests for the command line parser."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nodeboard.constants.defaults import LOG_FILE_DEFAULT
from nodeboard.main import build_parser, configure_logging


class TestParser:
    """Test build_parser()."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.url is None
        assert args.page_size is None
        assert args.theme is None
        assert args.config is None
        assert args.log_file == LOG_FILE_DEFAULT
        assert args.log_level == "INFO"

    def test_all_options(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            [
                "--url", "https://monitor.example/nodes",
                "--page-size", "100",
                "--theme", "light",
                "--config", str(tmp_path / "s.json"),
                "--log-level", "DEBUG",
            ]
        )
        assert args.url == "https://monitor.example/nodes"
        assert args.page_size == 100
        assert args.theme == "light"
        assert args.config == tmp_path / "s.json"
        assert args.log_level == "DEBUG"

    def test_rejects_unknown_page_size(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--page-size", "75"])

    def test_rejects_unknown_theme(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--theme", "blue"])


class TestConfigureLogging:
    """Test configure_logging()."""

    def test_creates_log_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        log_file = tmp_path / "logs" / "nodeboard.log"
        configure_logging(log_file, "WARNING")
        assert log_file.parent.is_dir()
        assert root.level == logging.WARNING
        for handler in root.handlers:
            handler.close()
