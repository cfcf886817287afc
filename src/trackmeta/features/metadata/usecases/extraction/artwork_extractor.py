"""Embedded artwork extraction.

Where: src/trackmeta/features/metadata/usecases/extraction/artwork_extractor.py
What: Copy the raw bytes of the first attached picture frame.
Why: Keep picture handling behind an explicit payload check.
"""

from __future__ import annotations

from pathlib import Path

from mutagen.id3 import ID3

from trackmeta.platform.logging import logger

from ...domain.frames import ARTWORK_FRAME_ID, PicturePayload
from ._frame_utils import first_payload

__all__ = ["extract_artwork"]


def extract_artwork(tags: ID3, *, source_path: Path | None = None) -> tuple[bytes, int] | None:
    """Return the first embedded picture as ``(data, length)``, or None.

    The bytes are returned verbatim; the image format is not inspected. A
    frame under ``APIC`` that is not a picture, or a picture with no data,
    counts as no artwork.
    """
    payload = first_payload(tags, ARTWORK_FRAME_ID)
    if payload is None:
        return None

    if not isinstance(payload, PicturePayload):
        logger.warning(
            "Frame %s in %s is not an attached picture; ignoring artwork",
            payload.frame_id,
            source_path,
        )
        return None

    if not payload.data:
        logger.debug("Empty %s frame in %s; no artwork", ARTWORK_FRAME_ID, source_path)
        return None

    logger.debug(
        "Artwork in %s: %d bytes (%s)",
        source_path,
        len(payload.data),
        payload.mime or "unknown mime",
    )
    return payload.data, len(payload.data)
