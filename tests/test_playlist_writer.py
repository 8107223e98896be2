from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cue2m3u.errors import WriteError
from cue2m3u.models import Playlist
from cue2m3u.playlist_writer import playlist_path, render_playlist, write_playlist


def _playlist(name: str = "A", *members: str) -> Playlist:
    return Playlist(name=name, members=members or ("A/1.cue", "A/2.cue"), folder=name)


class TestPlaylistPath:
    """Test playlist_path."""

    def test_places_playlist_in_source(self, tmp_path: Path) -> None:
        """Test that the playlist lands directly under the source directory."""
        assert playlist_path(tmp_path, _playlist("A")) == tmp_path / "A.m3u"

    def test_nested_name_maps_into_subfolder(self, tmp_path: Path) -> None:
        """Test that a nested group name keeps its folder component."""
        assert playlist_path(tmp_path, _playlist("PSX/Game")) == tmp_path / "PSX" / "Game.m3u"


class TestRenderPlaylist:
    """Test render_playlist."""

    def test_every_line_newline_terminated(self) -> None:
        """Test that each entry ends with exactly one newline."""
        assert render_playlist(_playlist("A", "A/1.cue", "A/2.cue")) == "A/1.cue\nA/2.cue\n"

    def test_no_trailing_blank_line(self) -> None:
        """Test that the last entry is not followed by an empty line."""
        assert not render_playlist(_playlist("A", "A/1.cue")).endswith("\n\n")


class TestWritePlaylist:
    """Test write_playlist."""

    def test_creates_new_playlist(self, tmp_path: Path) -> None:
        """Test writing a playlist that does not exist yet."""
        result = write_playlist(tmp_path, _playlist("A", "A/1.cue", "A/2.cue"))

        assert result.written is True
        assert result.path == tmp_path / "A.m3u"
        assert (tmp_path / "A.m3u").read_bytes() == b"A/1.cue\nA/2.cue\n"

    def test_existing_playlist_skipped_without_overwrite(self, tmp_path: Path, caplog) -> None:
        """Test that an existing playlist is left untouched when overwrite is off."""
        target = tmp_path / "A.m3u"
        target.write_text("my hand-edited playlist\n", encoding="utf-8")
        caplog.set_level(logging.DEBUG, logger="cue2m3u.playlist_writer")

        result = write_playlist(tmp_path, _playlist("A"), overwrite=False)

        assert result.written is False
        assert result.reason == "playlist-exists"
        assert target.read_text(encoding="utf-8") == "my hand-edited playlist\n"
        assert "Skipping Existing Playlist" in caplog.text

    def test_overwrite_truncates_existing_playlist(self, tmp_path: Path) -> None:
        """Test that overwrite replaces longer previous content entirely."""
        target = tmp_path / "A.m3u"
        target.write_text("old/1.cue\nold/2.cue\nold/3.cue\n", encoding="utf-8")

        result = write_playlist(tmp_path, _playlist("A", "A/1.cue"), overwrite=True)

        assert result.written is True
        assert target.read_text(encoding="utf-8") == "A/1.cue\n"

    def test_writes_utf8_without_newline_translation(self, tmp_path: Path) -> None:
        """Test that non-ASCII names are UTF-8 encoded with bare LF terminators."""
        write_playlist(tmp_path, _playlist("Pokémon", "Pokémon/ディスク1.cue"))

        assert (tmp_path / "Pokémon.m3u").read_bytes() == "Pokémon/ディスク1.cue\n".encode("utf-8")

    def test_missing_parent_raises_write_error(self, tmp_path: Path) -> None:
        """Test that filesystem failures surface as WriteError naming the playlist."""
        with pytest.raises(WriteError) as excinfo:
            write_playlist(tmp_path / "does-not-exist", _playlist("A"))

        assert excinfo.value.playlist_name == "A"
        assert "A" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_missing_parent_raises_even_with_overwrite(self, tmp_path: Path) -> None:
        """Test that overwrite does not hide other failures."""
        with pytest.raises(WriteError):
            write_playlist(tmp_path / "does-not-exist", _playlist("A"), overwrite=True)

    def test_target_is_directory_with_overwrite_raises(self, tmp_path: Path) -> None:
        """Test that a directory occupying the playlist path is an error when overwriting."""
        (tmp_path / "A.m3u").mkdir()

        with pytest.raises(WriteError):
            write_playlist(tmp_path, _playlist("A"), overwrite=True)

    def test_nested_playlist_written_into_its_folder(self, tmp_path: Path) -> None:
        """Test that a nested group name writes beside the game folder."""
        (tmp_path / "PSX" / "Game").mkdir(parents=True)

        write_playlist(tmp_path, _playlist("PSX/Game", "PSX/Game/1.cue"))

        assert (tmp_path / "PSX" / "Game.m3u").read_text(encoding="utf-8") == "PSX/Game/1.cue\n"

    def test_undecodable_name_bytes_written_verbatim(self, tmp_path: Path) -> None:
        """Test that file names with invalid UTF-8 bytes keep their on-disk bytes."""
        member = "Game/disc\udcff1.cue"

        result = write_playlist(tmp_path, _playlist("Game", member, "Game/disc2.cue"))

        assert result.written is True
        assert (tmp_path / "Game.m3u").read_bytes() == b"Game/disc\xff1.cue\nGame/disc2.cue\n"

    def test_unencodable_entry_raises_without_creating_file(self, tmp_path: Path) -> None:
        """Test that an entry that cannot be encoded fails before the playlist is created."""
        with pytest.raises(WriteError) as excinfo:
            write_playlist(tmp_path, _playlist("Game", "Game/disc\ud8001.cue"))

        assert excinfo.value.playlist_name == "Game"
        assert isinstance(excinfo.value.__cause__, UnicodeError)
        assert not (tmp_path / "Game.m3u").exists()

        # A later run still writes the playlist once the entry is fixed
        result = write_playlist(tmp_path, _playlist("Game", "Game/disc1.cue"))
        assert result.written is True
