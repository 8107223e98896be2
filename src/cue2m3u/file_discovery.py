"""Cue file discovery.

This module walks a source directory and yields every ``.cue`` file found in
it. Entries are visited in file-name order at each directory level so that the
playlists built from the results are deterministic. Symbolic links are
followed. Entries that cannot be read mid-walk are skipped; only a source
directory that cannot be opened at all is reported as a ``DiscoveryError``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .errors import DiscoveryError
from .logging_utils import render_fields_block

LOGGER = logging.getLogger(__name__)

CUE_SUFFIX = ".cue"

# (st_dev, st_ino) of a directory, used to detect symlink loops
DirIdentity = tuple[int, int]


def is_cue_file(name: str) -> bool:
    """Return True if a file name carries the literal ``.cue`` suffix."""
    return name.endswith(CUE_SUFFIX)


def _log_skipped(path: str | Path, reason: object) -> None:
    LOGGER.debug(
        render_fields_block(
            "Skipping Entry",
            {
                "Path": path,
                "Reason": reason,
            },
        )
    )


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)


def _identity(path: Path) -> DirIdentity:
    info = os.stat(path)
    return info.st_dev, info.st_ino


def _walk(
    entries: list[os.DirEntry[str]],
    recursive: bool,
    ancestors: frozenset[DirIdentity],
) -> Iterator[Path]:
    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            _log_skipped(entry.path, exc)
            continue

        if is_dir:
            if recursive:
                yield from _descend(Path(entry.path), ancestors)
            continue

        if is_file and is_cue_file(entry.name):
            yield Path(entry.path)


def _descend(directory: Path, ancestors: frozenset[DirIdentity]) -> Iterator[Path]:
    try:
        identity = _identity(directory)
        if identity in ancestors:
            _log_skipped(directory, "symlink loop")
            return
        entries = _sorted_entries(directory)
    except OSError as exc:
        _log_skipped(directory, exc)
        return

    yield from _walk(entries, True, ancestors | {identity})


def iter_cue_files(source_dir: Path, recursive: bool = False) -> Iterator[Path]:
    """Lazily yield absolute paths of cue files under ``source_dir``.

    Args:
        source_dir: Directory to scan.
        recursive: Descend into subdirectories when True; otherwise only the
            immediate children of ``source_dir`` are considered.

    Yields:
        Paths built by joining ``source_dir`` with each entry's relative location.

    Raises:
        DiscoveryError: On first iteration, if ``source_dir`` cannot be opened.
    """
    source_dir = Path(source_dir)
    try:
        root_identity = _identity(source_dir)
        entries = _sorted_entries(source_dir)
    except OSError as exc:
        raise DiscoveryError(source_dir, exc.strerror or str(exc)) from exc

    yield from _walk(entries, recursive, frozenset({root_identity}))


def find_cue_files(source_dir: Path, recursive: bool = False) -> list[Path]:
    """Return every cue file under ``source_dir`` in traversal order."""
    return list(iter_cue_files(source_dir, recursive))
