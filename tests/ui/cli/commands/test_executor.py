"""Tests for the show and scan command executors."""

from __future__ import annotations

import json
from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from mutagen.id3 import APIC, TIT2, TPE1
from pytest_mock import MockerFixture
from rich.console import Console

from trackmeta.ui.cli.args.options import ScanArgs, ShowArgs
from trackmeta.ui.cli.commands import ScanCommand, ShowCommand

AudioFactory = Callable[..., Path]


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None, soft_wrap=True), buffer


def _show_args(path: Path, **overrides: object) -> ShowArgs:
    values: dict[str, object] = {
        "command": "show",
        "music_path": path,
        "as_json": False,
        "artwork_out": None,
        "verbose": False,
        "quiet": False,
    }
    values.update(overrides)
    return ShowArgs(**values)  # pyright: ignore[reportArgumentType]


class TestShowCommand:
    def test_prints_record_table(self, make_mp3: AudioFactory) -> None:
        path = make_mp3("song.mp3", [TPE1(encoding=3, text=["Daft Punk"]), TIT2(encoding=3, text=["Da Funk"])])
        console, buffer = _console()

        record = ShowCommand(_show_args(path), console=console).execute()

        assert record is not None
        output = buffer.getvalue()
        assert "Daft Punk" in output
        assert "Da Funk" in output

    def test_json_output(self, make_mp3: AudioFactory) -> None:
        path = make_mp3("song.mp3", [TPE1(encoding=3, text=["Daft Punk"])])
        console, buffer = _console()

        _ = ShowCommand(_show_args(path, as_json=True), console=console).execute()

        data = json.loads(buffer.getvalue())
        assert data["artist"] == "Daft Punk"
        assert data["art_size"] == 0
        assert data["artwork_hash"] is None

    def test_no_metadata_message(self, tmp_path: Path) -> None:
        console, buffer = _console()

        record = ShowCommand(_show_args(tmp_path / "notes.txt"), console=console).execute()

        assert record is None
        assert "No metadata available" in buffer.getvalue()

    def test_writes_artwork(self, make_mp3: AudioFactory, jpeg_bytes: bytes, tmp_path: Path) -> None:
        path = make_mp3(
            "mix.mp3",
            [APIC(encoding=3, mime="image/jpeg", type=3, desc="", data=jpeg_bytes)],
        )
        target = tmp_path / "out" / "cover.jpg"
        console, _ = _console()

        _ = ShowCommand(_show_args(path, artwork_out=target, quiet=True), console=console).execute()

        assert target.read_bytes() == jpeg_bytes

    def test_artwork_out_without_artwork_writes_nothing(
        self, make_mp3: AudioFactory, tmp_path: Path
    ) -> None:
        path = make_mp3("song.mp3", [TPE1(encoding=3, text=["Daft Punk"])])
        target = tmp_path / "cover.jpg"
        console, _ = _console()

        _ = ShowCommand(_show_args(path, artwork_out=target), console=console).execute()

        assert not target.exists()

    def test_without_artwork_out_leaves_artwork_alone(
        self, make_mp3: AudioFactory, jpeg_bytes: bytes, mocker: MockerFixture
    ) -> None:
        path = make_mp3(
            "mix.mp3",
            [APIC(encoding=3, mime="image/jpeg", type=3, desc="", data=jpeg_bytes)],
        )
        console, _ = _console()
        write_spy = mocker.spy(ShowCommand, "_write_artwork")

        record = ShowCommand(_show_args(path, quiet=True), console=console).execute()

        assert record is not None
        assert record.art_size == len(jpeg_bytes)
        write_spy.assert_not_called()


class TestScanCommand:
    @pytest.fixture
    def library(self, tmp_path: Path, make_mp3: AudioFactory, make_aiff: AudioFactory) -> Path:
        _ = make_mp3("b.mp3", [TPE1(encoding=3, text=["Bicep"])])
        _ = make_aiff("a.aiff", [TIT2(encoding=3, text=["Glue"])])
        _ = make_mp3("untagged.mp3", None)
        _ = (tmp_path / "notes.txt").write_text("not audio")
        return tmp_path

    def test_collects_supported_files_sorted(self, library: Path) -> None:
        args = ScanArgs(command="scan", directory=library, as_json=False, verbose=False, quiet=True)

        files = ScanCommand(args).collect_files()

        assert [path.name for path in files] == ["a.aiff", "b.mp3", "untagged.mp3"]

    def test_scan_table_and_totals(self, library: Path) -> None:
        args = ScanArgs(command="scan", directory=library, as_json=False, verbose=False, quiet=False)
        console, buffer = _console()

        entries = ScanCommand(args, console=console).execute()

        assert len(entries) == 3
        assert sum(1 for entry in entries if entry.record is None) == 1
        output = buffer.getvalue()
        assert "Total files scanned: 3" in output
        assert "With metadata: 2" in output
        assert "Without metadata: 1" in output

    def test_scan_json(self, library: Path) -> None:
        args = ScanArgs(command="scan", directory=library, as_json=True, verbose=False, quiet=False)
        console, buffer = _console()

        _ = ScanCommand(args, console=console).execute()

        data = json.loads(buffer.getvalue())
        by_name = {Path(item["path"]).name: item["metadata"] for item in data}
        assert by_name["b.mp3"]["artist"] == "Bicep"
        assert by_name["a.aiff"]["title"] == "Glue"
        assert by_name["untagged.mp3"] is None
