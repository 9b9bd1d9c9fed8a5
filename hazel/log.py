"""Engine and client loggers, plus assertion helpers that log before failing."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"

_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\x1b[0m"
_LEVEL_COLOURS = {
    TRACE: "\x1b[37m",
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m\x1b[1m",
    logging.ERROR: "\x1b[31m\x1b[1m",
    logging.CRITICAL: "\x1b[1m\x1b[41m",
}


class HazelAssertionError(AssertionError):
    """Raised when an engine or client assertion fails."""


class _ColourFormatter(logging.Formatter):
    """Formats records with the engine pattern, coloured by level on a terminal."""

    def __init__(self, colour: bool) -> None:
        super().__init__(_PATTERN, _DATE_FORMAT)
        self._colour = colour

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._colour:
            return text
        colour = _LEVEL_COLOURS.get(record.levelno, "")
        return f"{colour}{text}{_RESET}" if colour else text


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColourFormatter(bool(isatty and isatty())))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init() -> None:
    """Set up the engine and client loggers to write everything to stdout."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """The logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger used by applications built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)


def _check(logger: logging.Logger, condition: object, message: object) -> None:
    if condition:
        return
    logger.error("Assertion failed: %s", message)
    raise HazelAssertionError(str(message))


def core_assert(condition: object, message: object) -> None:
    """Log through the engine logger and raise if ``condition`` is false."""
    _check(core_logger(), condition, message)


def app_assert(condition: object, message: object) -> None:
    """Log through the client logger and raise if ``condition`` is false."""
    _check(client_logger(), condition, message)