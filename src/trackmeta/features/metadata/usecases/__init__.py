"""Metadata feature usecases."""

from .extraction import MetadataExtractor, read_track

__all__ = ["MetadataExtractor", "read_track"]
