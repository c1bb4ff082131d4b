"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from rich_life.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should write under logs/<subdir> in the project root."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20261019"),
    )

    builder = logger_module.LoggerBuilder()
    custom_logger = (
        builder.name("rich_life.test_builder")
        .subdir("imports")
        .prefix("import_logs")
        .console(True)
        .level(logging.WARNING)
        .build()
    )

    assert custom_logger.name == "rich_life.test_builder"
    assert custom_logger.level == logging.WARNING
    assert custom_logger.propagate is False
    file_handlers = [
        h
        for h in custom_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected_path = tmp_path / "logs" / "imports" / "20261019_import_logs.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    assert len(custom_logger.handlers) == 2
    # Building again reuses the configured handlers.
    assert builder.build() is custom_logger
    assert len(custom_logger.handlers) == 2

    for handler in list(custom_logger.handlers):
        handler.close()
        custom_logger.removeHandler(handler)


def test_logger_builder_uses_injected_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honoured."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    captured = {}

    def _file_factory(path, formatter):
        captured["path"] = path
        captured["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("rich_life.test_factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console(False)
        .build()
    )

    assert built.handlers == [file_handler]
    assert captured["formatter"] is fmt
    assert captured["path"].parent == tmp_path / "logs" / "app"

    built.removeHandler(file_handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("app") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return distinct singletons."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert isinstance(app_logger_1.logger, MagicMock)
