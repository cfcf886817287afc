"""
Summary: Verify frame classification and text decoding helpers.
Why: The extractors rely on these checks instead of casting frames blindly.
"""

from __future__ import annotations

import pytest
from mutagen.id3 import APIC, COMM, ID3, PRIV, TBPM, TDRC, TPE1, PictureType

from trackmeta.features.metadata.domain import OtherPayload, PicturePayload, TextPayload
from trackmeta.features.metadata.usecases.extraction._frame_utils import (
    classify_frame,
    decode_first_value,
    first_payload,
)


def test_classify_text_frame() -> None:
    """Text-information frames become text payloads with every value kept."""
    payload = classify_frame(TPE1(encoding=3, text=["Daft Punk", "Romanthony"]))
    assert payload == TextPayload(frame_id="TPE1", values=("Daft Punk", "Romanthony"))


def test_classify_comment_and_timestamp_frames_as_text() -> None:
    """COMM and TDRC are text frames; timestamps render as their text form."""
    comment = classify_frame(COMM(encoding=3, lang="eng", desc="", text=["Promo"]))
    year = classify_frame(TDRC(encoding=3, text=["2000-11-13"]))
    bpm = classify_frame(TBPM(encoding=3, text=["123"]))

    assert comment == TextPayload(frame_id="COMM", values=("Promo",))
    assert year == TextPayload(frame_id="TDRC", values=("2000-11-13",))
    assert bpm == TextPayload(frame_id="TBPM", values=("123",))


def test_classify_picture_frame() -> None:
    """APIC frames become picture payloads carrying the raw bytes."""
    frame = APIC(
        encoding=3,
        mime="image/png",
        type=PictureType.COVER_FRONT,
        desc="cover",
        data=b"\x89PNG-data",
    )
    payload = classify_frame(frame)

    assert isinstance(payload, PicturePayload)
    assert payload.data == b"\x89PNG-data"
    assert payload.mime == "image/png"
    assert payload.picture_type == 3
    assert payload.description == "cover"


def test_classify_other_frame() -> None:
    """Frames that are neither text nor pictures are tagged as other."""
    payload = classify_frame(PRIV(owner="example.org", data=b"\x00\x01"))
    assert payload == OtherPayload(frame_id="PRIV")


def test_first_payload_returns_none_for_missing_frame() -> None:
    """An identifier with no frames has no payload."""
    assert first_payload(ID3(), "TPE1") is None


def test_first_payload_keeps_tag_order_for_keyed_frames() -> None:
    """Keyed frames such as COMM are taken in tag order, not key order."""
    tags = ID3()
    tags.add(COMM(encoding=3, lang="eng", desc="zeta", text=["one"]))
    tags.add(COMM(encoding=3, lang="eng", desc="alpha", text=["two"]))

    payload = first_payload(tags, "COMM")

    assert payload == TextPayload(frame_id="COMM", values=("one",))


def test_decode_first_value_takes_first_value() -> None:
    """Only the first value of a multi-value frame is decoded."""
    assert decode_first_value(TextPayload(frame_id="TPE1", values=("A", "B"))) == "A"


def test_decode_first_value_of_empty_frame_is_empty_string() -> None:
    """A frame that exists without values decodes to an empty string."""
    assert decode_first_value(TextPayload(frame_id="TPE1", values=())) == ""


def test_decode_first_value_rejects_unencodable_text() -> None:
    """Lone surrogates cannot be represented as UTF-8."""
    with pytest.raises(UnicodeError):
        _ = decode_first_value(TextPayload(frame_id="TPE1", values=("bad\udc80",)))
