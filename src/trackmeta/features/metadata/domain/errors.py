"""
Summary: Exceptions raised when a file yields no metadata record.
Why: Let the locator signal precise causes while the facade collapses them to one result.
"""

from __future__ import annotations

from pathlib import Path

from .formats import ContainerFormat


class MetadataUnavailableError(Exception):
    """Base class for every reason extraction produces no record."""

    path: Path

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedFormatError(MetadataUnavailableError):
    """The path has no extension or one outside the recognised set."""

    extension: str | None

    def __init__(self, path: Path, extension: str | None) -> None:
        label = f"'.{extension}'" if extension else "no extension"
        super().__init__(path, f"Unsupported file format ({label}): {path}")
        self.extension = extension


class OpenFailureError(MetadataUnavailableError):
    """The file is missing, unreadable, or not a valid container of its type."""

    container_format: ContainerFormat

    def __init__(self, path: Path, container_format: ContainerFormat, reason: str) -> None:
        super().__init__(path, f"Failed to open {container_format.value} file {path}: {reason}")
        self.container_format = container_format


class NoTagError(MetadataUnavailableError):
    """The container opened but carries no tag, or an empty one."""

    container_format: ContainerFormat

    def __init__(self, path: Path, container_format: ContainerFormat) -> None:
        super().__init__(path, f"No ID3 tag in {container_format.value} file {path}")
        self.container_format = container_format


__all__ = [
    "MetadataUnavailableError",
    "NoTagError",
    "OpenFailureError",
    "UnsupportedFormatError",
]
