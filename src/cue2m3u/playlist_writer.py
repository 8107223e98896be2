"""Playlist persistence.

Playlists are written as plain ``.m3u`` files directly under the source
directory: UTF-8, one relative cue path per line, each line terminated by a
single ``\\n``. File-name bytes that are not valid UTF-8 are written back
unchanged. Without ``overwrite`` an existing playlist is left untouched so
that re-running the generator never clobbers hand-edited playlists.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import WriteError
from .logging_utils import render_fields_block
from .models import Playlist, WriteResult

LOGGER = logging.getLogger(__name__)

PLAYLIST_ENCODING = "utf-8"
# Undecodable file-name bytes round-trip back to the bytes found on disk
ENCODING_ERRORS = "surrogateescape"
LINE_TERMINATOR = "\n"


def playlist_path(source_dir: Path, playlist: Playlist) -> Path:
    return Path(source_dir) / playlist.m3u_filename


def render_playlist(playlist: Playlist) -> str:
    return "".join(f"{line}{LINE_TERMINATOR}" for line in playlist.contents())


def write_playlist(source_dir: Path, playlist: Playlist, overwrite: bool = False) -> WriteResult:
    """Write ``playlist`` to ``<source_dir>/<name>.m3u``.

    Args:
        source_dir: Directory the playlist file is created in.
        playlist: Playlist to persist.
        overwrite: Truncate an existing file instead of skipping it.

    Returns:
        WriteResult with ``written=False`` and reason ``"playlist-exists"`` when the
        file already existed and ``overwrite`` is False.

    Raises:
        WriteError: For any other filesystem failure, or when an entry cannot be
            encoded. The original exception is chained and no file is created.
    """
    target = playlist_path(source_dir, playlist)
    mode = "wb" if overwrite else "xb"

    try:
        payload = render_playlist(playlist).encode(PLAYLIST_ENCODING, ENCODING_ERRORS)
    except UnicodeError as exc:
        raise WriteError(playlist.name, f"entry cannot be encoded as {PLAYLIST_ENCODING}: {exc.reason}") from exc

    try:
        with target.open(mode) as handle:
            handle.write(payload)
    except FileExistsError:
        LOGGER.debug(
            render_fields_block(
                "Skipping Existing Playlist",
                {
                    "Playlist": target,
                },
            )
        )
        return WriteResult(written=False, path=target, reason="playlist-exists")
    except OSError as exc:
        raise WriteError(playlist.name, exc.strerror or str(exc)) from exc

    LOGGER.debug(
        render_fields_block(
            "Playlist Written",
            {
                "Playlist": target,
                "Entries": len(playlist.members),
                "Mode": "overwrite" if overwrite else "create",
            },
        )
    )
    return WriteResult(written=True, path=target)
