"""
Summary: Container formats recognised by the extraction pipeline.
Why: Give the resolver, locators, and errors one shared vocabulary.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class ContainerFormat(StrEnum):
    """Audio containers whose ID3v2 tag can be read."""

    AIFF = "aiff"
    MPEG = "mpeg"
    UNSUPPORTED = "unsupported"


EXTENSION_FORMATS: Final[dict[str, ContainerFormat]] = {
    "aif": ContainerFormat.AIFF,
    "aiff": ContainerFormat.AIFF,
    "mp3": ContainerFormat.MPEG,
}

SUPPORTED_EXTENSIONS: Final[frozenset[str]] = frozenset(EXTENSION_FORMATS)


__all__ = ["ContainerFormat", "EXTENSION_FORMATS", "SUPPORTED_EXTENSIONS"]
