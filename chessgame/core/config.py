"""
Configuration loading.

Settings are read from environment variables (falling back to defaults) and exposed as SETTINGS.
Logging is only configured when the presentation layer asks for it through `configure_logging()`.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable

PACKAGE_LOGGER = "chessgame"
DEFAULT_LOG_LEVEL = "WARNING"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _as_log_level(value: Any) -> str:
    """Unknown level names fall back to the default instead of failing later in `configure_logging()`"""
    level = str(value).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    # unicode symbols (♔) or text codes (WK) in board views
    unicode_symbols: bool

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=_get(
                "CHESSGAME_LOG_LEVEL", DEFAULT_LOG_LEVEL, cast=_as_log_level
            ),
            unicode_symbols=_get("CHESSGAME_UNICODE_SYMBOLS", True, cast=_as_bool),
        )


SETTINGS = Settings.from_env()


def configure_logging(settings: Settings = SETTINGS) -> logging.Logger:
    """Set the level of the package logger. Attaches a stream handler if nothing handles the records yet."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
