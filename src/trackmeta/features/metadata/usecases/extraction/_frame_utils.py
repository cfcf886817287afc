"""Frame utility helpers.

Where: src/trackmeta/features/metadata/usecases/extraction/_frame_utils.py
What: Classify mutagen ID3 frames into payload variants and decode frame text.
Why: Give the frame and artwork extractors one checked way to read frames.
"""

from __future__ import annotations

from mutagen.id3 import APIC, ID3, Frame, TextFrame

from ...domain.frames import FramePayload, OtherPayload, PicturePayload, TextPayload

__all__ = [
    "classify_frame",
    "decode_first_value",
    "first_payload",
]


def classify_frame(frame: Frame) -> FramePayload:
    """Wrap a mutagen frame in the payload variant matching its class.

    Text-information frames and ``COMM`` (a ``TextFrame`` subclass in mutagen)
    become ``TextPayload``; ``APIC`` becomes ``PicturePayload``; everything
    else is ``OtherPayload``.
    """
    frame_id: str = frame.FrameID
    if isinstance(frame, TextFrame):
        return TextPayload(frame_id=frame_id, values=tuple(str(value) for value in frame.text))
    if isinstance(frame, APIC):
        return PicturePayload(
            frame_id=frame_id,
            data=bytes(frame.data),
            mime=str(frame.mime),
            picture_type=int(frame.type),
            description=str(frame.desc),
        )
    return OtherPayload(frame_id=frame_id)


def first_payload(tags: ID3, frame_id: str) -> FramePayload | None:
    """Classify the first frame stored under ``frame_id``, in tag order.

    Keyed frames such as ``COMM:desc:lang`` or ``APIC:cover`` count as
    ``frame_id`` too. ``ID3.getall`` does not promise tag order for those, so
    the tag is walked in the order mutagen read the frames instead.
    """
    prefix = frame_id + ":"
    for key, frame in tags.items():
        if key == frame_id or key.startswith(prefix):
            return classify_frame(frame)
    return None


def decode_first_value(payload: TextPayload) -> str:
    """Return the first text value of a payload as a UTF-8 representable string.

    A frame with no values decodes to ``""``.

    Raises:
        UnicodeEncodeError: If the value holds code points UTF-8 cannot encode,
            such as lone surrogates left by a malformed UTF-16 frame.
    """
    if not payload.values:
        return ""
    value = payload.values[0]
    _ = value.encode("utf-8")
    return value
