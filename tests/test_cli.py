from __future__ import annotations

import logging

import pytest

from eonje_swim import cli
from eonje_swim.bootstrap import logging as app_logging


def test_gui_accepts_a_link():
    args = cli.build_parser().parse_args(["gui", "--link", "https://eonjeswim.app/#3f2b8c1e-9a7d"])
    assert args.command == "gui"
    assert args.link == "https://eonjeswim.app/#3f2b8c1e-9a7d"


def test_api_defaults():
    args = cli.build_parser().parse_args(["api"])
    assert (args.host, args.port) == ("127.0.0.1", 8000)


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_configure_logging_writes_rotating_file_once(tmp_path, monkeypatch):
    monkeypatch.setattr(app_logging, "_INITIALIZED", False)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        app_logging.configure_logging(level="debug", log_dir=tmp_path)
        app_logging.configure_logging(level="debug", log_dir=tmp_path)
        added = [handler for handler in root.handlers if handler not in before]
        assert len(added) == 2
        assert (tmp_path / "eonje_swim.log").exists()
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(level)
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
