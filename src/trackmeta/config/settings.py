"""Where: src/trackmeta/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Let extraction and the CLI read plain constants instead of the config object.
"""

from __future__ import annotations

import logging

from trackmeta.config.config import config as app_config
from trackmeta.platform.logging import logger

# Extraction ------------------------------------------------------------------

# Whether extension matching in the format resolver is case-sensitive.
_case_sensitive = getattr(app_config, "case_sensitive_extensions", False)
if not isinstance(_case_sensitive, bool):
    logger.warning(
        "case_sensitive_extensions must be true or false, got %r; using false", _case_sensitive
    )
    _case_sensitive = False
CASE_SENSITIVE_EXTENSIONS: bool = _case_sensitive


# Logging ---------------------------------------------------------------------

_VALID_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_level_name = str(getattr(app_config, "log_level", "INFO") or "INFO").strip().upper()
CONSOLE_LOG_LEVEL: int = (
    logging.getLevelNamesMapping()[_level_name] if _level_name in _VALID_LEVELS else logging.INFO
)


__all__ = [
    "CASE_SENSITIVE_EXTENSIONS",
    "CONSOLE_LOG_LEVEL",
]
