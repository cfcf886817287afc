"""
/*
Path: tests/features/metadata/usecases/test_package_layout.py
Summary: Verifies metadata use case package exports.
Why: Guard against regressions when modules move between subpackages.
*/
"""

"""Ensure metadata use case packages remain importable."""

from importlib import import_module


def test_extraction_subpackage_exposes_pipeline_modules() -> None:
    """Extraction package should expose each pipeline stage via __all__."""

    extraction = import_module("trackmeta.features.metadata.usecases.extraction")

    for name in (
        "MetadataExtractor",
        "read_track",
        "resolve_format",
        "extract_text_fields",
        "extract_artwork",
        "AiffTagLocator",
        "Mp3TagLocator",
    ):
        assert name in extraction.__all__
        assert hasattr(extraction, name)


def test_usecases_package_reexports_facade() -> None:
    """The usecases package should surface the facade for orchestrators."""

    usecases = import_module("trackmeta.features.metadata.usecases")
    extraction = import_module("trackmeta.features.metadata.usecases.extraction")

    assert usecases.MetadataExtractor is extraction.MetadataExtractor
