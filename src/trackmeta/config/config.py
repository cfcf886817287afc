"""Where: src/trackmeta/config/config.py
What: Persisted application configuration backed by a commented TOML file.
Why: Give the CLI and derived settings one shared, lazily loaded object.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from trackmeta.config.paths import default_config_path, default_log_file
from trackmeta.platform.logging import logger


@dataclass
class Config:
    """Application configuration."""

    # Rotating log file written by the CLI; None keeps logging console-only
    log_file: Path | None = field(default=None, metadata={"path": True})

    # Console log level name
    log_level: str = "INFO"

    # Accept "MP3" as MPEG only when false
    case_sensitive_extensions: bool = False

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        # TOML has no path type; blank strings mean unset.
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path") and isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls) -> Config:
        """Return the shared configuration, reading the file on first use.

        A missing file yields the defaults and nothing is written to disk.
        Keys the application does not know are logged and ignored.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            OSError: If the file exists but cannot be read.
        """
        if cls._instance is not None:
            return cls._instance

        source = default_config_path()
        if not source.exists():
            logger.debug("No configuration at %s; using defaults", source)
            cls._instance = cls()
            cls._loaded_from = None
            return cls._instance

        try:
            with open(source, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration from %s: %s", source, e)
            raise

        known = {f.name for f in fields(cls)}
        for key in sorted(raw.keys() - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        cls._instance = cls(**{key: value for key, value in raw.items() if key in known})
        cls._loaded_from = source
        logger.debug("Configuration loaded from %s", source)
        return cls._instance

    def save(self) -> Path:
        """Write the configuration as commented TOML.

        Returns:
            Path: File that was written.
        """
        target = default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self.to_toml(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration to %s: %s", target, e)
            raise

        logger.info("Configuration saved to %s", target)
        return target

    def to_toml(self) -> str:
        """Render every key under a short comment block.

        An unset optional value leaves only its comments behind.
        """
        sections: list[tuple[str, list[str]]] = [
            (
                "log_file",
                [
                    "Log file path (optional)",
                    "Leave unset to log to the console only",
                    f'Example: log_file = "{default_log_file()}"',
                ],
            ),
            ("log_level", ["Console log level (DEBUG, INFO, WARNING, ERROR)"]),
            (
                "case_sensitive_extensions",
                [
                    "Extension matching (optional)",
                    'Set to true to accept only lower-case extensions such as "mp3"',
                ],
            ),
        ]

        lines = ["# trackmeta Configuration File", ""]
        for key, comments in sections:
            lines.extend(f"# {comment}" for comment in comments)
            value = getattr(self, key)
            if value is not None:
                lines.append(f"{key} = {_toml_value(value)}")
            lines.append("")
        return "\n".join(lines)


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, Path)):
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


# Global configuration instance
config = Config.load()
