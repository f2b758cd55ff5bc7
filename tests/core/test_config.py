"""Unit tests for /chessgame/core/config.py"""

import logging

import pytest

from chessgame.core.config import (
    DEFAULT_LOG_LEVEL,
    PACKAGE_LOGGER,
    Settings,
    configure_logging,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHESSGAME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHESSGAME_UNICODE_SYMBOLS", raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "WARNING"
    assert settings.unicode_symbols


@pytest.mark.parametrize(
    "env_value, expected",
    [("0", False), ("false", False), ("no", False), ("1", True), ("True", True), ("on", True)],
)
def test_unicode_symbols_from_env(
    monkeypatch: pytest.MonkeyPatch, env_value: str, expected: bool
) -> None:
    monkeypatch.setenv("CHESSGAME_UNICODE_SYMBOLS", env_value)
    assert Settings.from_env().unicode_symbols is expected


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESSGAME_LOG_LEVEL", "debug")
    assert Settings.from_env().log_level == "DEBUG"


def test_configure_logging() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    old_level, old_handlers = logger.level, list(logger.handlers)
    try:
        configured = configure_logging(Settings(log_level="DEBUG", unicode_symbols=True))
        assert configured is logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) >= 1

        # calling it again does not stack handlers
        handler_count = len(logger.handlers)
        configure_logging(Settings(log_level="INFO", unicode_symbols=True))
        assert len(logger.handlers) == handler_count
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(old_level)
        logger.handlers = old_handlers


@pytest.mark.parametrize("env_value", ["verbose", "", "loud"])
def test_unknown_log_level_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch, env_value: str
) -> None:
    """A typo in the level name must not make configure_logging() blow up later"""
    monkeypatch.setenv("CHESSGAME_LOG_LEVEL", env_value)
    settings = Settings.from_env()
    assert settings.log_level == DEFAULT_LOG_LEVEL

    logger = logging.getLogger(PACKAGE_LOGGER)
    old_level, old_handlers = logger.level, list(logger.handlers)
    try:
        configure_logging(settings)
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(old_level)
        logger.handlers = old_handlers
