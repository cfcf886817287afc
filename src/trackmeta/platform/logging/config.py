"""Logger bootstrap.

Where: platform/logging/config.py
What: Build the ``trackmeta`` logger with a rich console handler and an optional log file.
Why: Let the CLI rewire verbosity and file output after configuration loads.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import TrackRichHandler

LOGGER_NAME: Final[str] = "trackmeta"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps ``--json`` output on stdout parseable.
    handler = TrackRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Existing handlers are closed and replaced, so calling this again only
    changes where and how much is logged.

    Args:
        log_file: Rotating log file to add. None keeps logging console-only.
        console_level: Minimum level shown on the console.
        file_level: Minimum level written to ``log_file``.

    Returns:
        logging.Logger: The ``trackmeta`` logger.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))

    return app_logger


# Console-only until the CLI wires in the configured log file.
logger: Final[logging.Logger] = setup_logger(console_level=logging.WARNING)


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
