"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for orchestrators and tests.
"""

from ._base_locators import BaseTagLocator, LocatedTags, TagLocator
from .artwork_extractor import extract_artwork
from .format_locators import AiffTagLocator, Mp3TagLocator
from .format_resolver import resolve_format, split_extension
from .frame_extractor import extract_text_fields
from .track_record_extractor import MetadataExtractor, read_track

__all__ = [
    "MetadataExtractor",
    "read_track",
    "resolve_format",
    "split_extension",
    "extract_text_fields",
    "extract_artwork",
    "TagLocator",
    "BaseTagLocator",
    "LocatedTags",
    "AiffTagLocator",
    "Mp3TagLocator",
]
