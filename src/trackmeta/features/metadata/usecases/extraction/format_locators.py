"""Format-specific tag locators.

Where: src/trackmeta/features/metadata/usecases/extraction/format_locators.py
What: Define concrete tag locators for AIFF and MPEG containers.
Why: Keep per-container tag access separate from the scoped open/release logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, override

from mutagen import FileType, MutagenError
from mutagen.aiff import AIFF
from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.mp3 import MP3, HeaderNotFoundError

from trackmeta.platform.logging import logger

from ...domain.formats import ContainerFormat
from ._base_locators import BaseTagLocator

__all__ = [
    "AiffTagLocator",
    "Mp3TagLocator",
]


class AiffTagLocator(BaseTagLocator):
    """Locator for AIFF files; the ID3 tag lives in the container's ``ID3`` chunk."""

    FILE_CLASS: ClassVar[type[FileType] | None] = AIFF
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    CONTAINER_FORMAT: ClassVar[ContainerFormat] = ContainerFormat.AIFF

    @override
    def _tag_structure(self, container: FileType) -> ID3 | None:
        return container.tags


class Mp3TagLocator(BaseTagLocator):
    """Locator for MPEG audio files, reading only the ID3v2 tag.

    The tag does not depend on the audio stream: a file in which mutagen
    cannot sync to an MPEG frame (tag-only, truncated) still yields its
    ID3v2 tag when one is present at the start of the file.
    """

    FILE_CLASS: ClassVar[type[FileType] | None] = MP3
    # An ID3v1 trailer alone does not count as a tag.
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"load_v1": False}
    CONTAINER_FORMAT: ClassVar[ContainerFormat] = ContainerFormat.MPEG

    @override
    def _read_tags(self, fileobj: Any, file_path: Path) -> ID3 | None:
        try:
            container = MP3(fileobj, **self.FILE_INIT_PARAMS)
        except HeaderNotFoundError as exc:
            logger.debug("No MPEG audio frame in %s (%s); reading the ID3v2 tag alone", file_path, exc)
            return self._read_bare_tag(fileobj, file_path)
        except (MutagenError, OSError) as exc:
            raise self._open_failure(file_path, exc) from exc

        return self._tag_structure(container)

    def _read_bare_tag(self, fileobj: Any, file_path: Path) -> ID3 | None:
        _ = fileobj.seek(0)
        try:
            return ID3(fileobj, **self.FILE_INIT_PARAMS)
        except ID3NoHeaderError:
            return None
        except (MutagenError, OSError) as exc:
            raise self._open_failure(file_path, exc) from exc

    @override
    def _tag_structure(self, container: FileType) -> ID3 | None:
        return container.tags
