from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from textwrap import wrap
from typing import Union

DEFAULT_WRAP_WIDTH = 100
DEFAULT_LABEL_WIDTH = 20
DEFAULT_INDENT = "    "

FieldMapping = Union[Mapping[str, object], Sequence[tuple[str, object]]]


def _as_pairs(fields: FieldMapping) -> list[tuple[str, object]]:
    if isinstance(fields, Mapping):
        return [(str(key), value) for key, value in fields.items()]
    return [(str(key), value) for key, value in fields]


def _to_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(_to_text(item) for item in value)
    return str(value)


def _wrapped(text: str, width: int) -> list[str]:
    lines: list[str] = []
    for raw in text.splitlines() or [""]:
        # Paths must never be split mid-component
        lines.extend(wrap(raw, width=width, break_long_words=False, break_on_hyphens=False) or [""])
    return lines


class LogBlockBuilder:
    """Accumulates a titled, indented block of text for a single log record."""

    def __init__(
        self,
        title: str,
        *,
        wrap_width: int = DEFAULT_WRAP_WIDTH,
        label_width: int = DEFAULT_LABEL_WIDTH,
        indent: str = DEFAULT_INDENT,
        pad_top: bool = True,
    ) -> None:
        self.wrap_width = wrap_width
        self.label_width = label_width
        self.indent = indent
        self.lines: list[str] = [""] if pad_top else []
        self.lines.extend([title, "-" * len(title)])

    def add_fields(self, fields: FieldMapping | None) -> None:
        pairs = _as_pairs(fields) if fields else []
        if not pairs:
            return

        width = max(8, min(max(len(key) for key, _ in pairs), self.label_width))
        value_width = max(self.wrap_width - len(self.indent) - width - 2, 32)
        continuation = f"{self.indent}{'':<{width}}  "

        for key, value in pairs:
            first, *rest = _wrapped(_to_text(value), value_width)
            self.lines.append(f"{self.indent}{key:<{width}}: {first}")
            self.lines.extend(f"{continuation}{line}" for line in rest)

    def add_section(self, heading: str, items: Iterable[object], *, empty_label: str = "(none)") -> None:
        if self.lines and self.lines[-1] != "":
            self.lines.append("")
        self.lines.append(f"{heading}:")

        entries = [_to_text(item) for item in items if item is not None]
        if not entries:
            self.lines.append(f"{self.indent}{empty_label}")
            return

        bullet = f"{self.indent}- "
        for entry in entries:
            first, *rest = _wrapped(entry, max(self.wrap_width - len(bullet), 24))
            self.lines.append(f"{bullet}{first}".rstrip())
            self.lines.extend(f"{self.indent}  {line}" for line in rest)

    def render(self) -> str:
        return "\n".join(self.lines).rstrip()


def render_fields_block(title: str, fields: FieldMapping, *, pad_top: bool = True) -> str:
    builder = LogBlockBuilder(title, pad_top=pad_top)
    builder.add_fields(fields)
    return builder.render()
