"""Shared pytest fixtures that build real AIFF and MP3 files for extraction tests."""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from mutagen.aiff import AIFF
from mutagen.id3 import ID3, Frame

# MPEG-1 Layer III, 128 kbit/s, 44.1 kHz, no padding: 417 bytes per frame.
MPEG_FRAME_HEADER: bytes = b"\xff\xfb\x90\x64"
MPEG_FRAME_LENGTH: int = 417
MPEG_FRAME_COUNT: int = 20

AudioFactory = Callable[[str, Sequence[Frame] | None], Path]


def mpeg_stream(frame_count: int = MPEG_FRAME_COUNT) -> bytes:
    """Return a run of silent MPEG audio frames that mutagen can sync to."""

    frame = MPEG_FRAME_HEADER + b"\x00" * (MPEG_FRAME_LENGTH - len(MPEG_FRAME_HEADER))
    return frame * frame_count


def aiff_container() -> bytes:
    """Return a minimal mono 16-bit 44.1 kHz AIFF file with no samples."""

    # 44100 as an 80-bit IEEE 754 extended float.
    sample_rate = b"\x40\x0e\xac\x44" + b"\x00" * 6
    comm = struct.pack(">hLh", 1, 0, 16) + sample_rate
    ssnd = struct.pack(">LL", 0, 0)
    body = (
        b"AIFF"
        + b"COMM" + struct.pack(">L", len(comm)) + comm
        + b"SSND" + struct.pack(">L", len(ssnd)) + ssnd
    )
    return b"FORM" + struct.pack(">L", len(body)) + body


@pytest.fixture
def make_mp3(tmp_path: Path) -> AudioFactory:
    """Build an MP3 file, optionally prefixed with an ID3v2 tag holding ``frames``."""

    def _make(name: str, frames: Sequence[Frame] | None = None) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(mpeg_stream())
        if frames is not None:
            tags = ID3()
            for frame in frames:
                tags.add(frame)
            tags.save(path)
        return path

    return _make


@pytest.fixture
def make_aiff(tmp_path: Path) -> AudioFactory:
    """Build an AIFF file, optionally with an ``ID3`` chunk holding ``frames``."""

    def _make(name: str, frames: Sequence[Frame] | None = None) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(aiff_container())
        if frames is not None:
            audio = AIFF(path)
            audio.add_tags()
            assert audio.tags is not None
            for frame in frames:
                audio.tags.add(frame)
            audio.save()
        return path

    return _make


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Return 4096 bytes shaped like a JPEG (SOI ... EOI)."""

    body = bytes(index % 256 for index in range(4092))
    return b"\xff\xd8" + body + b"\xff\xd9"
