"""Playlist generation pipeline.

Runs discovery, path normalization, grouping, playlist building and writing
as one batch. Each stage consumes the previous stage's full output. Errors are
raised as the typed exceptions from ``cue2m3u.errors``; playlists written
before a failure stay on disk.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from rich.progress import Progress

from .file_discovery import find_cue_files
from .folder_grouping import group_files_by_folder
from .logging_utils import render_fields_block
from .models import GenerationStats
from .playlist_builder import check_name_collisions, make_playlists
from .playlist_writer import write_playlist
from .relative_paths import make_relative_paths
from .run_summary import log_run_recap

LOGGER = logging.getLogger(__name__)


def generate_playlists(
    source_dir: Path,
    *,
    recursive: bool = False,
    overwrite: bool = False,
) -> GenerationStats:
    """Generate one ``.m3u`` playlist per folder of cue files under ``source_dir``.

    Args:
        source_dir: Directory to scan; playlists are written directly into it.
        recursive: Scan subfolders as well as the immediate children.
        overwrite: Replace existing playlists instead of leaving them untouched.

    Returns:
        Statistics describing what was discovered and written.

    Raises:
        DiscoveryError: ``source_dir`` could not be opened; nothing is written.
        PathError: A discovered path was not under ``source_dir``.
        WriteError: A playlist could not be written, or two folders map to the same name.
    """
    source_dir = Path(source_dir)
    stats = GenerationStats()
    run_started = time.perf_counter()

    cue_files = find_cue_files(source_dir, recursive)
    stats.discovered = len(cue_files)
    LOGGER.debug(
        render_fields_block(
            "Discovered Cue Files",
            {
                "Source": source_dir,
                "Recursive": recursive,
                "Total": len(cue_files),
            },
        )
    )

    relative_files = make_relative_paths(source_dir, cue_files)
    groups = group_files_by_folder(relative_files)
    stats.groups = len(groups)

    playlists = make_playlists(source_dir, groups)
    check_name_collisions(playlists)

    with Progress(disable=not LOGGER.isEnabledFor(logging.INFO), transient=True) as progress:
        task_id = progress.add_task("Writing playlists", total=len(playlists))
        for playlist in sorted(playlists, key=lambda item: item.name):
            result = write_playlist(source_dir, playlist, overwrite)
            if result.written:
                stats.register_written(playlist.name)
            else:
                stats.register_skipped(playlist.name)
            progress.advance(task_id, 1)

    log_run_recap(stats, time.perf_counter() - run_started)
    return stats
