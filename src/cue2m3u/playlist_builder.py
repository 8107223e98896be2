"""Playlist construction from folder groups.

Each folder group becomes one playlist named after its folder. Cue files that
sit directly in the source directory form the root group, whose playlist is
named after the source directory itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import PathError, WriteError
from .folder_grouping import ROOT_FOLDER
from .models import FolderGroup, Playlist


def resolve_playlist_name(source_dir: Path, folder: str) -> str:
    """Return the playlist name for a folder group.

    Args:
        source_dir: Source directory the folder is relative to.
        folder: Relative folder key, "" for the root group.

    Returns:
        ``folder`` itself, or the final component of ``source_dir`` for the root group.

    Raises:
        PathError: If the root group has no usable name (``source_dir`` is a filesystem root).
    """
    if folder != ROOT_FOLDER:
        return folder

    source_dir = Path(source_dir)
    name = source_dir.name
    if name in ("", ".."):
        name = source_dir.resolve().name
    if not name:
        raise PathError(source_dir, source_dir)
    return name


def make_playlists(source_dir: Path, groups: FolderGroup) -> list[Playlist]:
    """Build one playlist per folder group, in group order."""
    playlists: list[Playlist] = []
    for folder, files in groups.items():
        playlists.append(
            Playlist(
                name=resolve_playlist_name(source_dir, folder),
                members=tuple(str(path) for path in files),
                folder=folder,
            )
        )
    return playlists


def _describe_folder(folder: str) -> str:
    return f"'{folder}'" if folder else "the source root"


def check_name_collisions(playlists: Iterable[Playlist]) -> None:
    """Fail if two folder groups resolve to the same playlist name.

    This happens when the source directory's own name equals the relative path
    of one of its subfolders, e.g. ``Game/disc1.cue`` next to ``Game/Game/disc1.cue``.

    Raises:
        WriteError: Naming both folders that produce the clashing playlist.
    """
    seen: dict[str, Playlist] = {}
    for playlist in playlists:
        previous = seen.get(playlist.name)
        if previous is not None:
            raise WriteError(
                playlist.name,
                f"produced by both {_describe_folder(previous.folder)} and {_describe_folder(playlist.folder)}",
            )
        seen[playlist.name] = playlist
