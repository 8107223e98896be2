from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import FolderGroup

ROOT_FOLDER = ""


def folder_key(path: Path) -> str:
    """Return the containing folder of a relative path, or "" for the source root."""
    parent = Path(path).parent
    if parent == Path("."):
        return ROOT_FOLDER
    return str(parent)


def group_files_by_folder(paths: Iterable[Path]) -> FolderGroup:
    """Group relative cue paths by containing folder, keeping arrival order."""
    groups: FolderGroup = {}
    for path in paths:
        groups.setdefault(folder_key(path), []).append(Path(path))
    return groups
