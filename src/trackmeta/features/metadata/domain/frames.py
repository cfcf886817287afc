"""
Summary: Frame identifiers and the tagged payload variant for ID3 frames.
Why: Map record fields to frames and force a type check before picture data is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Record field -> ID3v2 frame identifier.
FIELD_FRAMES: Final[dict[str, str]] = {
    "artist": "TPE1",
    "title": "TIT2",
    "album": "TALB",
    "remixer": "TPE4",
    "publisher": "TPUB",
    "comment": "COMM",
    "key": "TKEY",
    "bpm": "TBPM",
    "year": "TDRC",
    "track_number": "TRCK",
    "disc_number": "TPOS",
    "genre": "TCON",
}

ARTWORK_FRAME_ID: Final[str] = "APIC"


@dataclass(frozen=True, slots=True)
class TextPayload:
    """Text carried by a text-information or comment frame."""

    frame_id: str
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PicturePayload:
    """Attached picture carried by an APIC frame."""

    frame_id: str
    data: bytes
    mime: str = ""
    picture_type: int = 0
    description: str = ""


@dataclass(frozen=True, slots=True)
class OtherPayload:
    """Any frame whose payload is neither text nor a picture."""

    frame_id: str


FramePayload = TextPayload | PicturePayload | OtherPayload


__all__ = [
    "ARTWORK_FRAME_ID",
    "FIELD_FRAMES",
    "FramePayload",
    "OtherPayload",
    "PicturePayload",
    "TextPayload",
]
