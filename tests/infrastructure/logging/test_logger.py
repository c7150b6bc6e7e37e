"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_dated_file(tmp_path, monkeypatch):
    """LoggerBuilder should write under <root>/logs/<subdir>/."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240105"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("ledger.test.statements")
        .subdir("statements")
        .prefix("statement_logs")
        .console(False)
        .level(logging.WARNING)
    )
    built = builder.build()

    assert built.name == "ledger.test.statements"
    assert built.level == logging.WARNING
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "statements" / "20240105_statement_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    # A second build should not stack handlers.
    assert builder.build() is built
    assert len(built.handlers) == 1


def test_logger_builder_uses_injected_factories(tmp_path, monkeypatch):
    """Custom factories should be used for formatter and handlers."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    file_factory = MagicMock(return_value=file_handler)
    console_factory = MagicMock(return_value=console_handler)

    built = (
        logger_module.LoggerBuilder()
        .name("ledger.test.factories")
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert file_factory.call_args.args[1] is fmt
    console_factory.assert_called_once_with(fmt)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
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

    logger = logger_module.Logger("ledger")
    logger.info("recorded")
    logger.warning("absent")
    logger.error("failed")
    logger.debug("folded")
    logger.critical("down")

    fake_logger.info.assert_called_with("recorded")
    fake_logger.warning.assert_called_with("absent")
    fake_logger.error.assert_called_with("failed")
    fake_logger.debug.assert_called_with("folded")
    fake_logger.critical.assert_called_with("down")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should each return a singleton."""
    subdirs = []

    def _fake_build(self):
        subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert subdirs == ["app", "usage"]
