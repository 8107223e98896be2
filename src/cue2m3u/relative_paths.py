from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import PathError


def make_relative_paths(source_dir: Path, paths: Iterable[Path]) -> list[Path]:
    """Rewrite discovered paths relative to ``source_dir``.

    Raises:
        PathError: If a path is not located under ``source_dir``.
    """
    source_dir = Path(source_dir)
    relative: list[Path] = []
    for path in paths:
        try:
            relative.append(Path(path).relative_to(source_dir))
        except ValueError as exc:
            raise PathError(Path(path), source_dir) from exc
    return relative
