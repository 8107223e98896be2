"""Exception types raised by the playlist generation pipeline."""

from __future__ import annotations

from pathlib import Path


class Cue2M3UError(Exception):
    """Base exception for failures that abort a generation run."""


class DiscoveryError(Cue2M3UError):
    """Raised when the source directory cannot be opened for scanning."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error finding cue files in {path}: {reason}")
        self.path = path
        self.reason = reason


class PathError(Cue2M3UError):
    """Raised when a discovered path does not live under the source directory."""

    def __init__(self, path: Path, source_dir: Path) -> None:
        super().__init__(f"{path} is not located under {source_dir}")
        self.path = path
        self.source_dir = source_dir


class WriteError(Cue2M3UError):
    """Raised when a playlist cannot be written for a reason other than pre-existence."""

    def __init__(self, playlist_name: str, reason: str) -> None:
        super().__init__(f"Error writing playlist '{playlist_name}': {reason}")
        self.playlist_name = playlist_name
        self.reason = reason
