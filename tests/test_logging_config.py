"""
Unit Tests — Logging Configuration
==================================
setup_logging installs the colored console handler and, when asked, a
daily file handler.
"""
import logging

import pytest

from path_helper.utils.logging_config import ColoredFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_console_only_by_default(tmp_path):
    setup_logging(level=logging.DEBUG, log_to_file=False, log_dir=str(tmp_path))
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)
    assert root.level == logging.DEBUG
    assert list(tmp_path.iterdir()) == []


def test_file_handler_writes_log(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(level=logging.INFO, log_to_file=True, log_dir=str(log_dir))
    logging.getLogger("path_helper.test").info("resolved /a/b")
    for handler in logging.getLogger().handlers:
        handler.flush()

    files = list(log_dir.iterdir())
    assert len(files) == 1
    assert files[0].name.startswith("path_helper_")
    assert "resolved /a/b" in files[0].read_text()


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(log_to_file=False, log_dir=str(tmp_path))
    setup_logging(log_to_file=False, log_dir=str(tmp_path))
    assert len(logging.getLogger().handlers) == 1


def test_colored_formatter_wraps_message():
    record = logging.LogRecord("path_helper", logging.WARNING, __file__, 1, "careful", None, None)
    output = ColoredFormatter().format(record)
    assert "careful" in output
    assert output.startswith(ColoredFormatter.yellow)
    assert output.endswith(ColoredFormatter.reset)
