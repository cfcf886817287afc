# Where: trackmeta.shared.track_record
# What: Canonical TrackRecord dataclass returned by metadata extraction.
# Why: Centralize the record shape so extraction, CLI, and tests agree on it.

import hashlib
from dataclasses import dataclass
from typing import Any, Final

TEXT_FIELDS: Final[tuple[str, ...]] = (
    "artist",
    "title",
    "album",
    "remixer",
    "publisher",
    "comment",
    "key",
    "bpm",
    "year",
    "track_number",
    "disc_number",
    "genre",
)


@dataclass(frozen=True, slots=True)
class TrackRecord:
    """Descriptive fields and embedded artwork of one audio file.

    Every text field is either a complete string or ``None`` when the tag has
    no frame for it. ``artwork`` holds the raw bytes of the first embedded
    picture and ``art_size`` its length; both report "no artwork" together
    (``None`` and ``0``).

    The record owns plain ``str``/``bytes`` values only, so dropping the last
    reference releases everything it holds.
    """

    artist: str | None = None
    title: str | None = None
    album: str | None = None
    remixer: str | None = None
    publisher: str | None = None
    comment: str | None = None
    key: str | None = None
    bpm: str | None = None
    year: str | None = None
    track_number: str | None = None
    disc_number: str | None = None
    genre: str | None = None
    artwork: bytes | None = None
    art_size: int = 0

    def __post_init__(self) -> None:
        if self.artwork is None:
            if self.art_size != 0:
                raise ValueError(f"art_size must be 0 without artwork, got {self.art_size}")
            return
        if len(self.artwork) == 0:
            raise ValueError("artwork must be None rather than empty")
        if self.art_size != len(self.artwork):
            raise ValueError(
                f"art_size {self.art_size} does not match artwork length {len(self.artwork)}"
            )

    @property
    def has_artwork(self) -> bool:
        """Whether the record carries embedded artwork."""
        return self.artwork is not None

    @property
    def artwork_hash(self) -> str | None:
        """Hex MD5 digest of the artwork bytes, used as a stable artwork key."""
        if self.artwork is None:
            return None
        return hashlib.md5(self.artwork).hexdigest()

    def text_fields(self) -> dict[str, str | None]:
        """Return the twelve text fields in their canonical order."""
        return {name: getattr(self, name) for name in TEXT_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable view of the record without artwork bytes."""
        data: dict[str, Any] = self.text_fields()
        data["art_size"] = self.art_size
        data["artwork_hash"] = self.artwork_hash
        return data


__all__ = ["TEXT_FIELDS", "TrackRecord"]
