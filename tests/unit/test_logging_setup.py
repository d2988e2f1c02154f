"""Unit tests for setup_logging."""

import logging
import sys
from pathlib import Path

import pytest

from vdireport.config import ReportConfig
from vdireport.main import build_parser, resolve_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:

    def test_file_and_stderr_handlers(self, temp_data_dir, monkeypatch, restore_root_logger):
        monkeypatch.chdir(temp_data_dir)
        config = ReportConfig()
        log_path = Path(temp_data_dir) / "logs" / "vdireport.log"
        config.set('logging.file_path', str(log_path))

        setup_logging(config, "DEBUG")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert log_path.parent.exists()
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(file_handlers) == 1
        assert len(stream_handlers) == 1
        assert stream_handlers[0].stream is sys.stderr

    def test_no_handlers_configured(self, temp_data_dir, monkeypatch, restore_root_logger):
        monkeypatch.chdir(temp_data_dir)
        config = ReportConfig()
        config.set('logging.console_output', False)

        setup_logging(config, "INFO")

        assert [type(h) for h in restore_root_logger.handlers] == [logging.NullHandler]


@pytest.mark.unit
class TestArgumentParser:

    def test_no_arguments_required(self):
        args = build_parser().parse_args([])

        assert args.config is None
        assert args.session_file is None
        assert args.scheme is None
        assert args.json is False

    def test_rejects_unknown_scheme(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--scheme", "binary"])


@pytest.mark.unit
class TestResolveLogLevel:

    @pytest.mark.parametrize("name,expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("Error", logging.ERROR),
    ])
    def test_known_levels(self, name, expected):
        assert resolve_log_level(name) == expected

    @pytest.mark.parametrize("name", ["LOUD", "", 10, None, "getLogger"])
    def test_invalid_levels(self, name):
        with pytest.raises(ValueError, match="Invalid logging level"):
            resolve_log_level(name)

    def test_invalid_level_leaves_handlers_untouched(self, temp_data_dir, monkeypatch,
                                                     restore_root_logger):
        monkeypatch.chdir(temp_data_dir)
        handlers_before = list(restore_root_logger.handlers)

        with pytest.raises(ValueError):
            setup_logging(ReportConfig(), "verbose")

        assert restore_root_logger.handlers == handlers_before
