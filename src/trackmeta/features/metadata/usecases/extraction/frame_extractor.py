"""Text field extraction from ID3 frames.

Where: src/trackmeta/features/metadata/usecases/extraction/frame_extractor.py
What: Read the twelve record text fields from their mapped ID3 frames.
Why: Isolate frame lookup and decoding policy from container handling.
"""

from __future__ import annotations

from pathlib import Path

from mutagen.id3 import ID3

from trackmeta.platform.logging import logger

from ...domain.frames import FIELD_FRAMES, TextPayload
from ._frame_utils import decode_first_value, first_payload

__all__ = ["extract_text_fields"]


def extract_text_fields(tags: ID3, *, source_path: Path | None = None) -> dict[str, str | None]:
    """Extract every mapped text field from a tag structure.

    For each field the first frame under its identifier is used. A missing
    frame, a frame that does not carry text, or a value that cannot be
    represented as UTF-8 all yield ``None`` for that field only.

    Args:
        tags: ID3 tag structure of an opened container.
        source_path: File the tags came from, used for log context.

    Returns:
        Mapping of record field name to decoded text or ``None``.
    """
    fields: dict[str, str | None] = {}

    for field_name, frame_id in FIELD_FRAMES.items():
        payload = first_payload(tags, frame_id)
        if payload is None:
            fields[field_name] = None
            continue

        if not isinstance(payload, TextPayload):
            logger.warning(
                "Frame %s in %s is not a text frame; treating %s as absent",
                frame_id,
                source_path,
                field_name,
            )
            fields[field_name] = None
            continue

        try:
            fields[field_name] = decode_first_value(payload)
        except UnicodeError as exc:
            logger.warning(
                "Could not decode %s frame for %s: %s",
                frame_id,
                field_name,
                exc,
                extra={
                    "extraction_event": "extraction.decode_failure",
                    "source_path": str(source_path) if source_path else None,
                    "frame_id": frame_id,
                },
            )
            fields[field_name] = None
            continue

        logger.debug("%s tag (%s): %s", field_name, frame_id, fields[field_name])

    return fields
