"""Shared base classes for tag locators.

Where: src/trackmeta/features/metadata/usecases/extraction/_base_locators.py
What: Define the locator interface and the scoped open/release logic shared by containers.
Why: Guarantee every container handle is released on every exit path.
"""

from __future__ import annotations

import abc
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, override

from mutagen import FileType, MutagenError
from mutagen.id3 import ID3

from trackmeta.platform.logging import logger

from ...domain.errors import NoTagError, OpenFailureError
from ...domain.formats import ContainerFormat

__all__ = [
    "BaseTagLocator",
    "LocatedTags",
    "TagLocator",
]


@dataclass(frozen=True, slots=True)
class LocatedTags:
    """ID3 tag structure of an opened container.

    Only valid inside the ``with`` block that produced it.
    """

    path: Path
    container_format: ContainerFormat
    tags: ID3


class TagLocator(abc.ABC):
    """Abstract base class for container tag locators."""

    @abc.abstractmethod
    def open_tags(self, file_path: Path) -> AbstractContextManager[LocatedTags]:
        """Open ``file_path`` and yield its tag structure for the duration of a block."""
        raise NotImplementedError


class BaseTagLocator(TagLocator, abc.ABC):
    """Base class for locators backed by a mutagen file type."""

    FILE_CLASS: ClassVar[type[FileType] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    CONTAINER_FORMAT: ClassVar[ContainerFormat] = ContainerFormat.UNSUPPORTED

    def _load_container(self, fileobj: Any, file_path: Path) -> FileType:
        """Parse the opened file with the container class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            return self.FILE_CLASS(fileobj, **self.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            raise self._open_failure(file_path, exc) from exc

    def _open_failure(self, file_path: Path, exc: Exception) -> OpenFailureError:
        """Log a parse failure and build the error reporting it."""
        logger.warning(
            "Failed to parse %s container %s: %s",
            self.CONTAINER_FORMAT.value,
            file_path,
            exc,
        )
        return OpenFailureError(file_path, self.CONTAINER_FORMAT, str(exc))

    def _read_tags(self, fileobj: Any, file_path: Path) -> ID3 | None:
        """Parse the container and return its tag structure."""
        container = self._load_container(fileobj, file_path)
        logger.debug("Opened %s with container type: %s", file_path, type(container).__name__)
        return self._tag_structure(container)

    @abc.abstractmethod
    def _tag_structure(self, container: FileType) -> ID3 | None:
        """Return the container's ID3 tag structure, or None when it has none."""
        raise NotImplementedError

    @override
    @contextmanager
    def open_tags(self, file_path: Path) -> Iterator[LocatedTags]:
        """Open the file, yield its tags, and close the handle when the block exits.

        Raises:
            OpenFailureError: If the file cannot be opened or parsed.
            NoTagError: If the container has no tag or an empty one.
        """
        try:
            fileobj = open(file_path, "rb")
        except OSError as exc:
            logger.warning("Failed to open %s: %s", file_path, exc)
            raise OpenFailureError(
                file_path, self.CONTAINER_FORMAT, exc.strerror or str(exc)
            ) from exc

        with fileobj:
            tags = self._read_tags(fileobj, file_path)
            if tags is None or len(tags) == 0:
                raise NoTagError(file_path, self.CONTAINER_FORMAT)

            yield LocatedTags(path=file_path, container_format=self.CONTAINER_FORMAT, tags=tags)
