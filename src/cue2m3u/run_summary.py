"""Run recap logging for a playlist generation run.

Formats the statistics collected while generating playlists into a single
log block: how many cue files were found, which playlists were written and
which were left alone because they already existed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from .logging_utils import LogBlockBuilder

if TYPE_CHECKING:
    from .models import GenerationStats

LOGGER = logging.getLogger(__name__)


def has_activity(stats: GenerationStats) -> bool:
    """Return True if the run discovered files or touched any playlist."""
    return bool(stats.discovered or stats.written or stats.skipped_existing)


def summarize_names(names: List[str], *, limit: int = 10) -> List[str]:
    """Return at most ``limit`` playlist names plus a remainder line."""
    lines = list(names[:limit])
    remaining = len(names) - limit
    if remaining > 0:
        lines.append(f"... {remaining} more (use --verbose for full list)")
    return lines


def log_run_recap(stats: GenerationStats, duration: float) -> None:
    """Log the run recap block.

    Args:
        stats: Statistics gathered by the generator.
        duration: Wall-clock run time in seconds.
    """
    builder = LogBlockBuilder("Run Recap")
    builder.add_fields(
        {
            "Duration": f"{duration:.2f}s",
            "Cue Files": stats.discovered,
            "Playlists": stats.playlists,
            "Written": len(stats.written),
            "Skipped (existing)": len(stats.skipped_existing),
        }
    )

    verbose = LOGGER.isEnabledFor(logging.DEBUG)
    limit = len(stats.written) + len(stats.skipped_existing) if verbose else 10
    if stats.written:
        builder.add_section("Written", summarize_names(sorted(stats.written), limit=limit))
    if stats.skipped_existing:
        builder.add_section("Already Present", summarize_names(sorted(stats.skipped_existing), limit=limit))
    if not has_activity(stats):
        builder.add_section("Notes", ["No cue files found."])

    LOGGER.info(builder.render())
