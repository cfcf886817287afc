"""Read descriptive ID3 fields and embedded artwork from AIFF and MP3 files."""

from trackmeta.features.metadata import (
    SUPPORTED_EXTENSIONS,
    TEXT_FIELDS,
    ContainerFormat,
    MetadataExtractor,
    MetadataUnavailableError,
    NoTagError,
    OpenFailureError,
    TrackRecord,
    UnsupportedFormatError,
    read_track,
    resolve_format,
)

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "TEXT_FIELDS",
    "ContainerFormat",
    "MetadataExtractor",
    "MetadataUnavailableError",
    "NoTagError",
    "OpenFailureError",
    "TrackRecord",
    "UnsupportedFormatError",
    "read_track",
    "resolve_format",
]
