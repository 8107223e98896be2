from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler

from .command_help import get_command_help
from .config import LOG_LEVELS, load_settings
from .errors import Cue2M3UError
from .generator import generate_playlists
from .help_formatter import PROGRAM_NAME, RichHelpFormatter, render_extended_examples
from .logging_utils import render_fields_block
from .version import __version__

LOGGER = logging.getLogger(__name__)

CONSOLE = Console()
ERROR_CONSOLE = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_installed_handlers: list[logging.Handler] = []


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Route log records to a Rich console handler and, optionally, a log file.

    Handlers installed by a previous call are replaced; other root handlers are left alone.

    Raises:
        OSError: The log file could not be opened. Existing handlers are kept.
    """
    handlers: list[logging.Handler] = []
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        handlers.append(file_handler)

    console_handler = RichHandler(console=ERROR_CONSOLE, show_path=False, markup=False)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.insert(0, console_handler)

    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    _installed_handlers.extend(handlers)
    for handler in _installed_handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _print_error(message: str) -> None:
    ERROR_CONSOLE.print(f"error: {message}", style="bold red", markup=False, highlight=False, soft_wrap=True)


def _formatter_for(command: str) -> Callable[[str], RichHelpFormatter]:
    help_content = get_command_help(command)

    def factory(prog: str) -> RichHelpFormatter:
        formatter = RichHelpFormatter(prog)
        formatter.add_examples(help_content.brief_examples)
        formatter.add_environment_variables(help_content.env_vars)
        formatter.add_tips(help_content.tips)
        return formatter

    return factory


def run_generate(args: argparse.Namespace) -> int:
    if getattr(args, "examples", False):
        render_extended_examples("generate", get_command_help("generate").extended_examples, console=CONSOLE)
        return EXIT_OK

    if args.source is None:
        _print_error("the following arguments are required: SOURCE")
        return EXIT_USAGE

    try:
        settings = load_settings(args.config)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        _print_error(f"Failed to load configuration: {exc}")
        return EXIT_FAILURE

    level = "DEBUG" if args.verbose else (args.log_level or settings.log_level)
    log_file = args.log_file or settings.log_file
    try:
        configure_logging(level, log_file)
    except OSError as exc:
        _print_error(f"Failed to open log file {log_file}: {exc.strerror or exc}")
        return EXIT_FAILURE

    source_dir = Path(args.source).expanduser().resolve()
    recursive = bool(args.recursive or settings.recursive)
    overwrite = bool(args.overwrite or settings.overwrite)
    LOGGER.debug(
        render_fields_block(
            "Starting Generation",
            {
                "Version": __version__,
                "Source": source_dir,
                "Recursive": recursive,
                "Overwrite": overwrite,
            },
        )
    )

    try:
        generate_playlists(source_dir, recursive=recursive, overwrite=overwrite)
    except Cue2M3UError as exc:
        _print_error(str(exc))
        return EXIT_FAILURE

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Generate playlists for disc-based games.",
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: $CUE2M3U_CONFIG)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Console log level (default: INFO)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", title="commands", metavar="COMMAND")
    subparsers.required = True

    generate = subparsers.add_parser(
        "generate",
        help="Generate playlists",
        description="Write one .m3u playlist per folder of .cue files found under SOURCE.",
        formatter_class=_formatter_for("generate"),
    )
    generate.add_argument("-r", "--recursive", action="store_true", help="Scan subfolders of SOURCE")
    generate.add_argument("-o", "--overwrite", action="store_true", help="Overwrite existing playlists")
    generate.add_argument("--examples", action="store_true", help="Show extended usage examples and exit")
    generate.add_argument(
        "source",
        metavar="SOURCE",
        type=Path,
        nargs="?",
        help="Location of the games to generate playlists for",
    )
    generate.set_defaults(handler=run_generate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.handler(args)
