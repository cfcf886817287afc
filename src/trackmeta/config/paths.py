"""Where: src/trackmeta/config/paths.py
What: Locate the config file and the log directory of a portable checkout.
Why: Every module asks here instead of hard-coding locations.

The project root is the nearest ancestor holding ``pyproject.toml`` or
``.git``. The config lives at ``<root>/config/config.toml`` and logs go to
``<root>/logs`` unless ``TRACKMETA_LOG_DIR`` names another directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

LOG_DIR_ENV: Final[str] = "TRACKMETA_LOG_DIR"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")
_CONFIG_RELATIVE: Final[Path] = Path("config") / "config.toml"
_LOG_FILE_NAME: Final[str] = "trackmeta.log"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` carrying a root marker.

    Falls back to the current working directory when no ancestor has one,
    which is the case for a wheel installed into site-packages.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def env_override(env_var: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Return the absolute path named by ``env_var``, or None when unset or blank."""

    value = (env if env is not None else os.environ).get(env_var, "").strip()
    if not value:
        return None
    return Path(value).expanduser().resolve()


def default_config_path() -> Path:
    """Path of the TOML config file under the project root."""

    return (_detect_repo_root() / _CONFIG_RELATIVE).resolve()


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Directory for log files, honouring ``TRACKMETA_LOG_DIR``."""

    override = env_override(LOG_DIR_ENV, env)
    if override is not None:
        return override
    return (_detect_repo_root() / "logs").resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Suggested rotating log file inside ``default_log_dir``."""

    return default_log_dir(env) / _LOG_FILE_NAME


__all__ = [
    "LOG_DIR_ENV",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "env_override",
]
