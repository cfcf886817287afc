# Where: trackmeta.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of the record type across layers.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .track_record import TEXT_FIELDS, TrackRecord

__all__ = ["TEXT_FIELDS", "TrackRecord"]
