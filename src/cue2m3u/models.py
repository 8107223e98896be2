from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# Relative folder path -> cue files found in it, in discovery order.
FolderGroup = Dict[str, List[Path]]

M3U_SUFFIX = ".m3u"


@dataclass(frozen=True, slots=True)
class Playlist:
    name: str
    members: Tuple[str, ...]
    folder: str = ""

    @property
    def m3u_filename(self) -> str:
        return f"{self.name}{M3U_SUFFIX}"

    def contents(self) -> List[str]:
        return list(self.members)


@dataclass(slots=True)
class WriteResult:
    written: bool
    path: Path
    reason: Optional[str] = None


@dataclass(slots=True)
class GenerationStats:
    discovered: int = 0
    groups: int = 0
    written: List[str] = field(default_factory=list)
    skipped_existing: List[str] = field(default_factory=list)

    @property
    def playlists(self) -> int:
        return len(self.written) + len(self.skipped_existing)

    def register_written(self, name: str) -> None:
        self.written.append(name)

    def register_skipped(self, name: str) -> None:
        self.skipped_existing.append(name)
