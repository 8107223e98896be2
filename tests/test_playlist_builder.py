from __future__ import annotations

from pathlib import Path

import pytest

from cue2m3u.errors import PathError, WriteError
from cue2m3u.models import Playlist
from cue2m3u.playlist_builder import check_name_collisions, make_playlists, resolve_playlist_name


class TestResolvePlaylistName:
    """Test resolve_playlist_name."""

    def test_folder_key_is_used_as_name(self, tmp_path: Path) -> None:
        """Test that a non-root group keeps its folder path as name."""
        assert resolve_playlist_name(tmp_path / "Library", "A") == "A"

    def test_nested_folder_key_is_kept_verbatim(self, tmp_path: Path) -> None:
        """Test that nested folders are not flattened."""
        assert resolve_playlist_name(tmp_path, "PSX/Game") == "PSX/Game"

    def test_root_group_uses_source_basename(self, tmp_path: Path) -> None:
        """Test that the root group is named after the source directory."""
        assert resolve_playlist_name(tmp_path / "Game", "") == "Game"

    def test_root_group_resolves_dot_source(self, tmp_path: Path, monkeypatch) -> None:
        """Test that a '.' source is resolved to the working directory name."""
        source = tmp_path / "Game"
        source.mkdir()
        monkeypatch.chdir(source)

        assert resolve_playlist_name(Path("."), "") == "Game"

    def test_root_group_resolves_parent_source(self, tmp_path: Path, monkeypatch) -> None:
        """Test that a '..' source is named after the parent directory."""
        source = tmp_path / "Game"
        (source / "Sub").mkdir(parents=True)
        monkeypatch.chdir(source / "Sub")

        assert resolve_playlist_name(Path(".."), "") == "Game"
        assert resolve_playlist_name(source / "Sub" / "..", "") == "Game"

    def test_filesystem_root_has_no_name(self) -> None:
        """Test that the filesystem root cannot name a root group."""
        with pytest.raises(PathError):
            resolve_playlist_name(Path("/"), "")


class TestMakePlaylists:
    """Test make_playlists."""

    def test_one_playlist_per_group(self, tmp_path: Path) -> None:
        """Test that every folder group becomes a playlist with string members."""
        groups = {
            "A": [Path("A/1.cue"), Path("A/2.cue")],
            "B": [Path("B/1.cue")],
        }

        playlists = make_playlists(tmp_path / "Library", groups)

        assert playlists == [
            Playlist(name="A", members=("A/1.cue", "A/2.cue"), folder="A"),
            Playlist(name="B", members=("B/1.cue",), folder="B"),
        ]

    def test_root_group_named_after_source(self, tmp_path: Path) -> None:
        """Test that root-level cue files produce a playlist named after the source."""
        playlists = make_playlists(tmp_path / "Game", {"": [Path("disc1.cue"), Path("disc2.cue")]})

        assert len(playlists) == 1
        assert playlists[0].name == "Game"
        assert playlists[0].folder == ""
        assert playlists[0].members == ("disc1.cue", "disc2.cue")

    def test_no_groups_no_playlists(self, tmp_path: Path) -> None:
        """Test that an empty grouping yields no playlists."""
        assert make_playlists(tmp_path, {}) == []


class TestCheckNameCollisions:
    """Test check_name_collisions."""

    def test_distinct_names_pass(self) -> None:
        """Test that unique names do not raise."""
        check_name_collisions(
            [
                Playlist(name="A", members=("A/1.cue",), folder="A"),
                Playlist(name="B", members=("B/1.cue",), folder="B"),
            ]
        )

    def test_root_group_clashing_with_subfolder_raises(self, tmp_path: Path) -> None:
        """Test that the root substitution colliding with a folder is reported."""
        groups = {
            "": [Path("disc1.cue")],
            "Game": [Path("Game/disc1.cue")],
        }
        playlists = make_playlists(tmp_path / "Game", groups)

        with pytest.raises(WriteError) as excinfo:
            check_name_collisions(playlists)

        assert excinfo.value.playlist_name == "Game"
        message = str(excinfo.value)
        assert "the source root" in message
        assert "'Game'" in message
