import logging
import sys

import contentconv
from contentconv import logconfig
from contentconv.logconfig import setup_logging


def test_setup_logging_installs_one_handler(fresh_logger):
    setup_logging("debug", logger=fresh_logger)
    assert len(fresh_logger.handlers) == 1
    assert fresh_logger.level == logging.DEBUG

    # second call is a no-op
    setup_logging("error", logger=fresh_logger)
    assert len(fresh_logger.handlers) == 1
    assert fresh_logger.level == logging.DEBUG

def test_handler_writes_to_stdout_with_format(fresh_logger):
    setup_logging("info", logger=fresh_logger)
    h = fresh_logger.handlers[0]
    assert h.stream is sys.stdout
    assert h.formatter._fmt == "%(asctime)s %(levelname)s %(name)s :: %(message)s"

def test_defaults_to_settings_level(fresh_logger, monkeypatch):
    monkeypatch.setattr(logconfig, "LOG_LEVEL", "WARNING")
    setup_logging(logger=fresh_logger)
    assert fresh_logger.level == logging.WARNING

def test_unknown_level_falls_back_to_info(fresh_logger):
    setup_logging("chatty", logger=fresh_logger)
    assert fresh_logger.level == logging.INFO

def test_default_target_is_package_logger_not_root(package_logger):
    root_handlers = logging.getLogger().handlers[:]
    out = contentconv.setup_logging("debug")
    assert out is package_logger
    assert len(package_logger.handlers) == 1
    assert logging.getLogger().handlers == root_handlers
