"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, its setup function, and the extraction event handler.
Why: Give every layer one import path for logging.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import TrackRichHandler

__all__ = [
    "LOGGER_NAME",
    "TrackRichHandler",
    "logger",
    "setup_logger",
]
