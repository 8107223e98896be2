from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class CommandHelp:
    """
    Structured help content for a CLI command.

    Provides examples, environment variable documentation, and helpful tips
    for use with the RichHelpFormatter.
    """

    brief_examples: List[Tuple[str, str]] = field(default_factory=list)
    """Brief examples shown in --help (2-3 most common use cases)."""

    extended_examples: List[Tuple[str, str]] = field(default_factory=list)
    """Extended examples shown in --examples."""

    env_vars: List[Tuple[str, str]] = field(default_factory=list)
    """List of (variable_name, description) tuples documenting environment variables."""

    tips: List[str] = field(default_factory=list)


GENERATE_COMMAND_HELP = CommandHelp(
    brief_examples=[
        (
            "Write a playlist for the cue files sitting directly in a game folder",
            "cue2m3u generate ~/roms/psx/Final-Fantasy-VII",
        ),
        (
            "Scan a whole library, one playlist per game folder",
            "cue2m3u generate --recursive ~/roms/psx",
        ),
    ],
    extended_examples=[
        (
            "Write a playlist for the cue files sitting directly in a game folder",
            "cue2m3u generate ~/roms/psx/Final-Fantasy-VII",
        ),
        (
            "Scan a whole library, one playlist per game folder",
            "cue2m3u generate --recursive ~/roms/psx",
        ),
        (
            "Regenerate every playlist, replacing ones written by an earlier run",
            "cue2m3u generate --recursive --overwrite ~/roms/psx",
        ),
        (
            "Show which folders were scanned and which playlists were skipped",
            "cue2m3u --verbose generate --recursive ~/roms/saturn",
        ),
        (
            "Keep a log file next to the library",
            "cue2m3u --log-file ~/roms/cue2m3u.log generate -r ~/roms",
        ),
        (
            "Load defaults from a YAML configuration file",
            "cue2m3u --config ~/.config/cue2m3u.yaml generate ~/roms/segacd",
        ),
        (
            "Run as a Python module",
            "python -m cue2m3u generate --recursive ~/roms/pce-cd",
        ),
    ],
    env_vars=[
        ("CUE2M3U_CONFIG", "Path to a YAML configuration file"),
        ("CUE2M3U_RECURSIVE", "Scan subfolders by default (true/false)"),
        ("CUE2M3U_OVERWRITE", "Overwrite existing playlists by default (true/false)"),
        ("CUE2M3U_LOG_LEVEL", "Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"),
        ("CUE2M3U_LOG_FILE", "Also write logs to this file"),
    ],
    tips=[
        "Existing playlists are left untouched unless --overwrite is given",
        "Playlists are written into SOURCE and list paths relative to it",
        "Cue files directly inside SOURCE produce a playlist named after SOURCE",
    ],
)


# Command help registry mapping command names to their help content
COMMAND_HELP: Dict[str, CommandHelp] = {
    "generate": GENERATE_COMMAND_HELP,
}


def get_command_help(command: str) -> CommandHelp:
    """
    Retrieve help content for a specific command.

    Raises:
        KeyError: If command is not recognized
    """
    return COMMAND_HELP[command]
