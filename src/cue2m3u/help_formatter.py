from __future__ import annotations

import argparse
import shutil

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

PROGRAM_NAME = "cue2m3u"

SECTION_ICONS = {
    "usage": "🚀",
    "positional arguments": "📋",
    "optional arguments": "⚙️",
    "options": "⚙️",
    "commands": "🧭",
}


class RichHelpFormatter(argparse.HelpFormatter):
    """
    Argparse help formatter that renders section titles, examples, environment
    variables and tips with Rich.

    When the console is not a terminal the plain argparse output is returned
    unchanged, so piped help stays readable.
    """

    def __init__(
        self,
        prog: str,
        indent_increment: int = 2,
        max_help_position: int = 24,
        width: int | None = None,
        console: Console | None = None,
    ) -> None:
        if width is None:
            width = min(shutil.get_terminal_size().columns, 120)

        super().__init__(
            prog=prog,
            indent_increment=indent_increment,
            max_help_position=max_help_position,
            width=width,
        )

        self.console = console or Console()
        self._examples: list[tuple[str, str]] = []
        self._env_vars: list[tuple[str, str]] = []
        self._tips: list[str] = []

    def add_examples(self, examples: list[tuple[str, str]]) -> None:
        self._examples = list(examples)

    def add_environment_variables(self, env_vars: list[tuple[str, str]]) -> None:
        self._env_vars = list(env_vars)

    def add_tips(self, tips: list[str]) -> None:
        self._tips = list(tips)

    def format_help(self) -> str:
        standard_help = super().format_help()
        if not self.console.is_terminal:
            return standard_help

        parts: list[str] = []
        title: str | None = None
        body: list[str] = []
        for line in standard_help.split("\n"):
            # Unindented lines ending in ':' start a new argparse section
            if line and not line[0].isspace() and line.endswith(":"):
                if title is not None:
                    parts.extend(self._render_section(title, "\n".join(body)))
                title, body = line[:-1], []
            else:
                body.append(line)
        if title is not None:
            parts.extend(self._render_section(title, "\n".join(body)))
        elif standard_help.strip():
            parts.append(standard_help)

        if self._examples:
            parts.append(self._render_examples())
        if self._env_vars:
            parts.append(self._render_env_vars())
        if self._tips:
            parts.append(self._render_tips())

        return "\n".join(parts)

    def _capture(self, *renderables: object, style: str | None = None) -> str:
        with self.console.capture() as capture:
            for renderable in renderables:
                self.console.print(renderable, style=style)
        return capture.get()

    def _render_section(self, title: str, content: str) -> list[str]:
        icon = SECTION_ICONS.get(title.lower(), "")
        heading = Text(f"{icon} {title}" if icon else title, style="bold bright_cyan")
        rendered = [self._capture(heading)]
        if content.strip():
            rendered.append(content)
        rendered.append("")
        return rendered

    def _render_examples(self) -> str:
        with self.console.capture() as capture:
            self.console.print(Text("📚 Examples:", style="bold bright_cyan"))
            self.console.print()
            for index, (description, command) in enumerate(self._examples, 1):
                line = Text()
                line.append(f"  {index}. ", style="dim cyan")
                line.append(description, style="bright_white")
                self.console.print(line)
                self.console.print(f"     $ {command}", style="bright_yellow", markup=False)
                if index < len(self._examples):
                    self.console.print()
            self.console.print()
            self.console.print(
                "  💡 Run with --examples to see more usage examples", style="dim italic bright_blue"
            )
        return capture.get()

    def _render_env_vars(self) -> str:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Variable", style="bright_green bold", no_wrap=True)
        table.add_column("Description", style="bright_white")
        for name, description in self._env_vars:
            table.add_row(name, description)
        return self._capture(Text("🔧 Environment Variables:", style="bold bright_cyan"), "", table)

    def _render_tips(self) -> str:
        lines: list[object] = [Text("💡 Tips:", style="bold bright_cyan"), ""]
        for tip in self._tips:
            text = Text()
            text.append("  ✨ ", style="bright_yellow")
            text.append(tip, style="bright_white")
            lines.append(text)
        return self._capture(*lines)


def _example_category(command: str) -> str:
    if command.startswith("python "):
        return "🐍 Python Module Usage"
    if command.startswith(f"{PROGRAM_NAME} "):
        return "💻 Command-Line Interface"
    return "📝 Other Examples"


def render_extended_examples(
    command_name: str,
    examples: list[tuple[str, str]],
    console: Console | None = None,
) -> None:
    """
    Print every example for a command, grouped by how it is invoked.

    Args:
        command_name: Name of the command (for the title)
        examples: List of (description, command) tuples
        console: Rich Console instance (creates new if None)
    """
    if console is None:
        console = Console()

    title = Text()
    title.append("📚 Extended Examples: ", style="bold bright_white")
    title.append(f"{PROGRAM_NAME} {command_name}", style="bold bright_cyan")

    console.print()
    console.print(Panel(title, style="bold bright_cyan", border_style="bright_cyan"))
    console.print()

    grouped: dict[str, list[tuple[str, str]]] = {}
    for description, command in examples:
        grouped.setdefault(_example_category(command), []).append((description, command))

    for category, entries in grouped.items():
        console.print(Text(category, style="bold bright_yellow"))
        console.print()
        for index, (description, command) in enumerate(entries, 1):
            line = Text()
            line.append(f"  {index}. ", style="dim bright_cyan")
            line.append(description, style="bright_white")
            console.print(line)
            console.print(f"     $ {command}", style="bright_green", markup=False)
            console.print()

    footer = Text()
    footer.append("💡 Tip: ", style="bright_yellow bold")
    footer.append("Use --help to see concise help with common options", style="bright_white")
    console.print(Panel(footer, style="dim bright_blue", border_style="dim bright_blue"))
    console.print()
