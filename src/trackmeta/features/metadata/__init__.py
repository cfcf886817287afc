# Where: trackmeta.features.metadata.__init__
# What: Expose metadata extraction services, domain errors, and the record type.
# Why: Provide a cohesive import surface for UI and integration layers.

from trackmeta.shared.track_record import TEXT_FIELDS, TrackRecord
from .domain import (
    ContainerFormat,
    MetadataUnavailableError,
    NoTagError,
    OpenFailureError,
    SUPPORTED_EXTENSIONS,
    UnsupportedFormatError,
)
from .usecases.extraction import MetadataExtractor, read_track, resolve_format

__all__ = [
    "TEXT_FIELDS",
    "TrackRecord",
    "ContainerFormat",
    "SUPPORTED_EXTENSIONS",
    "MetadataExtractor",
    "read_track",
    "resolve_format",
    "MetadataUnavailableError",
    "UnsupportedFormatError",
    "OpenFailureError",
    "NoTagError",
]
