"""Logging for the wins CLI, built on loguru.

Console output goes to stderr at the level chosen by ``LOG_LEVEL`` or the
``--verbose``/``--quiet`` flags. A rotating file sink is added when
``Settings.logging.log_file`` is set. Records from httpx (githubkit) and openai are
routed through loguru.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger, Record

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_configured = False

# Libraries that log through the standard library
_STDLIB_LOGGERS = ("httpx", "httpcore", "openai")

_CONSOLE_FORMAT = (
    "<dim>{{time:HH:mm:ss}}</dim> | <level>{{level: <8}}</level> | "
    "<cyan>{source}</cyan> - <level>{{message}}</level>\n{{exception}}"
)
_FILE_FORMAT = (
    "{{time:YYYY-MM-DD HH:mm:ss.SSS}} | {{level: <8}} | "
    "{source}:{{function}}:{{line}} | {{extra}} | {{message}}\n{{exception}}"
)


def _source(record: Record) -> str:
    """Bound module name, or the stdlib logger name for intercepted records."""
    return "{extra[name]}" if "name" in record["extra"] else "{name}"


def _console_format(record: Record) -> str:
    return _CONSOLE_FORMAT.format(source=_source(record))


def _file_format(record: Record) -> str:
    return _FILE_FORMAT.format(source=_source(record))


class InterceptHandler(logging.Handler):
    """Handler to intercept standard library logging and route to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Route stdlib log record to loguru."""
        from types import FrameType

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        # Find caller from where originated the logged message
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame is not None:
            if frame.f_code.co_filename != logging.__file__:
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def resolve_level(level: LogLevel, *, verbose: bool = False, quiet: bool = False) -> LogLevel:
    """Apply the CLI flags to the configured level. --verbose wins over --quiet."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return level


def setup_logging(
    level: LogLevel = "INFO",
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure the console sink and, optionally, a rotating debug log file.

    Args:
        level: Base log level from Settings
        verbose: Force DEBUG
        quiet: Force WARNING (ignored when verbose is set)
        log_file: Path for the file sink; every record at DEBUG and above
        rotation: When to rotate the log file (e.g., "10 MB", "1 day")
        retention: How long to keep rotated logs
    """
    global _configured

    effective_level = resolve_level(level, verbose=verbose, quiet=quiet)

    logger.remove()
    logger.add(
        sys.stderr,
        level=effective_level,
        format=_console_format,
        colorize=True,
        diagnose=False,
    )

    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            format=_file_format,
            rotation=rotation,
            retention=retention,
            compression="gz",
        )

    _intercept_stdlib_logging(effective_level)
    _configured = True


def _intercept_stdlib_logging(level: LogLevel) -> None:
    """Route standard library loggers (httpx via githubkit, openai) to loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Quiet unless DEBUG; httpx logs every request at INFO
    lib_level = logging.DEBUG if level in ("TRACE", "DEBUG") else logging.WARNING
    for name in _STDLIB_LOGGERS:
        logging.getLogger(name).setLevel(lib_level)


def get_logger(name: str) -> Logger:
    """Get a logger with the given name bound as context.

    Usage:
        from wins_tracker.logging import get_logger
        logger = get_logger(__name__)
    """
    return logger.bind(name=name)


def bind_repo(owner: str, repo: str) -> Logger:
    """Logger for the sync engine with ``repo`` ("owner/name") bound."""
    return logger.bind(name="sync", repo=f"{owner}/{repo}")


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks (used by tests between runs)."""
    global _configured
    logger.remove()
    _configured = False
