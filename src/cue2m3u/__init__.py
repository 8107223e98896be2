"""cue2m3u core package.

Generates ``.m3u`` playlists that group the ``.cue`` files of multi-disc games
so an emulator front-end can load them as a single entry:

- **file_discovery**: Walks the source directory and yields ``.cue`` files
- **relative_paths**: Rewrites discovered paths relative to the source directory
- **folder_grouping**: Groups cue files by containing folder
- **playlist_builder**: Turns folder groups into named playlists
- **playlist_writer**: Persists playlists honoring the overwrite policy
- **generator**: Runs the whole pipeline as one batch
- **cli**: The ``cue2m3u generate`` command

The main entry point is ``generate_playlists``.
"""

from .errors import Cue2M3UError, DiscoveryError, PathError, WriteError
from .generator import generate_playlists
from .models import GenerationStats, Playlist
from .version import __version__

__all__ = [
    "__version__",
    "Cue2M3UError",
    "DiscoveryError",
    "GenerationStats",
    "PathError",
    "Playlist",
    "WriteError",
    "generate_playlists",
]
