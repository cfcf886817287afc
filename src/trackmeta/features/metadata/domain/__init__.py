"""
Summary: Domain vocabulary for metadata extraction.
Why: Share formats, frame mappings, and errors without pulling in usecases.
"""

from .errors import (
    MetadataUnavailableError,
    NoTagError,
    OpenFailureError,
    UnsupportedFormatError,
)
from .formats import EXTENSION_FORMATS, SUPPORTED_EXTENSIONS, ContainerFormat
from .frames import (
    ARTWORK_FRAME_ID,
    FIELD_FRAMES,
    FramePayload,
    OtherPayload,
    PicturePayload,
    TextPayload,
)

__all__ = [
    "ARTWORK_FRAME_ID",
    "ContainerFormat",
    "EXTENSION_FORMATS",
    "FIELD_FRAMES",
    "FramePayload",
    "MetadataUnavailableError",
    "NoTagError",
    "OpenFailureError",
    "OtherPayload",
    "PicturePayload",
    "SUPPORTED_EXTENSIONS",
    "TextPayload",
    "UnsupportedFormatError",
]
