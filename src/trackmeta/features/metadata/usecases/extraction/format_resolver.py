"""Container format resolution from file paths.

Where: src/trackmeta/features/metadata/usecases/extraction/format_resolver.py
What: Map a path's extension onto the container parser that should read it.
Why: Keep dispatch a pure function so unsupported paths never reach file I/O.
"""

from __future__ import annotations

import os

from ...domain.formats import EXTENSION_FORMATS, ContainerFormat

__all__ = ["resolve_format", "split_extension"]


def split_extension(path: str | os.PathLike[str]) -> str | None:
    """Return the text after the last ``.`` of the full path, or None without a dot.

    The whole path string is inspected, so ``"archive/.mp3"`` yields ``"mp3"``
    and ``"song."`` yields ``""``.
    """
    _, dot, extension = os.fspath(path).rpartition(".")
    if not dot:
        return None
    return extension


def resolve_format(
    path: str | os.PathLike[str],
    *,
    case_sensitive: bool = False,
) -> ContainerFormat:
    """Select the container format for ``path`` from its extension.

    Args:
        path: File path to inspect. The file is never opened.
        case_sensitive: When True only lower-case extensions match
            (``"MP3"`` is unsupported); otherwise case is ignored.

    Returns:
        ContainerFormat: ``AIFF`` for ``aif``/``aiff``, ``MPEG`` for ``mp3``,
        ``UNSUPPORTED`` for anything else including a missing or empty extension.
    """
    extension = split_extension(path)
    if not extension:
        return ContainerFormat.UNSUPPORTED

    key = extension if case_sensitive else extension.lower()
    return EXTENSION_FORMATS.get(key, ContainerFormat.UNSUPPORTED)
