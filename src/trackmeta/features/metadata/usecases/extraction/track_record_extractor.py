"""Audio file metadata extraction functionality.

Where: src/trackmeta/features/metadata/usecases/extraction/track_record_extractor.py
What: Provide the MetadataExtractor facade wiring resolver, locators, and extractors.
Why: Offer one entry point that turns a path into a TrackRecord or "no metadata".
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from trackmeta.config.settings import CASE_SENSITIVE_EXTENSIONS
from trackmeta.platform.logging import logger
from trackmeta.shared.track_record import TrackRecord

from ...domain.errors import (
    MetadataUnavailableError,
    NoTagError,
    UnsupportedFormatError,
)
from ...domain.formats import ContainerFormat
from ._base_locators import TagLocator
from .artwork_extractor import extract_artwork
from .format_locators import AiffTagLocator, Mp3TagLocator
from .format_resolver import resolve_format, split_extension
from .frame_extractor import extract_text_fields

__all__ = [
    "MetadataExtractor",
    "read_track",
]


class MetadataExtractor:
    """Facade class for extracting a TrackRecord from an audio file.

    The container parser is selected from the file extension; AIFF and MP3
    are supported.
    """

    SUPPORTED_FORMATS: ClassVar[frozenset[ContainerFormat]] = frozenset(
        {ContainerFormat.AIFF, ContainerFormat.MPEG}
    )

    case_sensitive_extensions: ClassVar[bool] = CASE_SENSITIVE_EXTENSIONS

    # Mapping from container format to its tag locator.
    _locator_map: ClassVar[dict[ContainerFormat, TagLocator]] = {
        ContainerFormat.AIFF: AiffTagLocator(),
        ContainerFormat.MPEG: Mp3TagLocator(),
    }

    @classmethod
    def configure_case_sensitivity(cls, case_sensitive: bool) -> None:
        """Override the extension matching policy loaded from configuration."""

        cls.case_sensitive_extensions = case_sensitive

    @classmethod
    def resolve(cls, file_path: str | os.PathLike[str]) -> ContainerFormat:
        """Resolve the container format using the configured case policy."""

        return resolve_format(file_path, case_sensitive=cls.case_sensitive_extensions)

    @classmethod
    def is_supported(cls, file_path: str | os.PathLike[str]) -> bool:
        """Whether ``file_path`` has an extension this extractor can read."""

        return cls.resolve(file_path) in cls.SUPPORTED_FORMATS

    @classmethod
    def extract_or_raise(cls, file_path: str | os.PathLike[str]) -> TrackRecord:
        """Extract a TrackRecord, raising when the file yields no metadata.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackRecord: Record built from the file's ID3 tag.

        Raises:
            UnsupportedFormatError: If the extension is missing or unrecognised.
            OpenFailureError: If the file cannot be opened or parsed.
            NoTagError: If the file carries no tag or an empty one.
        """
        path = Path(file_path)
        container_format = cls.resolve(file_path)
        locator = cls._locator_map.get(container_format)
        if locator is None:
            raise UnsupportedFormatError(path, split_extension(file_path))

        logger.debug(
            "Extracting %s metadata from %s",
            container_format.value,
            path,
            extra={"extraction_event": "extraction.start", "source_path": str(path)},
        )

        with locator.open_tags(path) as located:
            fields = extract_text_fields(located.tags, source_path=path)
            artwork = extract_artwork(located.tags, source_path=path)

        art_data, art_size = artwork if artwork is not None else (None, 0)
        record = TrackRecord(**fields, artwork=art_data, art_size=art_size)

        logger.debug(
            "Extracted metadata from %s",
            path,
            extra={
                "extraction_event": "extraction.success",
                "source_path": str(path),
                "artist": record.artist,
                "title": record.title,
                "art_size": record.art_size,
            },
        )
        return record

    @classmethod
    def extract(cls, file_path: str | os.PathLike[str]) -> TrackRecord | None:
        """Extract a TrackRecord, or None when the file yields no metadata.

        Unsupported extensions, unreadable or invalid files, and files without
        a tag all produce None; the cause is logged.
        """
        try:
            return cls.extract_or_raise(file_path)
        except MetadataUnavailableError as exc:
            level = logging.WARNING
            if isinstance(exc, (UnsupportedFormatError, NoTagError)):
                level = logging.DEBUG
            logger.log(
                level,
                "%s",
                exc,
                extra={
                    "extraction_event": "extraction.no_metadata",
                    "source_path": str(exc.path),
                    "reason": type(exc).__name__,
                },
            )
            return None


def read_track(file_path: str | os.PathLike[str]) -> TrackRecord | None:
    """Extract the TrackRecord for ``file_path``, or None when it has no metadata."""

    return MetadataExtractor.extract(file_path)
