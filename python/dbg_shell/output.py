"""Output helpers for dbg-shell."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING, List, Optional, Sequence, TextIO

from .options import Option, OptionRegistry, OptionType, type_text

if TYPE_CHECKING:  # pragma: no cover
    from .context import ShellContext

HELP_WIDTH = 72
HELP_INDENT = "    "
HELP_TRAILER = (
    'Type "help <command>" for more information.',
    "Press Ctrl+D to quit.",
)


def register_options(options: OptionRegistry) -> Option:
    """Register the options owned by the output layer."""
    return options.register(Option("color", OptionType.BOOLEAN, help="Colorize disassembly output."))


def emit_result(message: str, *, stream: Optional[TextIO] = None) -> None:
    print(message, file=stream or sys.stdout)


def emit_error(message: str, *, stream: Optional[TextIO] = None) -> None:
    """Print a user-facing error to stderr."""
    print(message, file=stream or sys.stderr)


def colorize(ctx: "ShellContext", code: str) -> int:
    """Write an ANSI escape when the ``color`` option is on."""
    if not ctx.color_option.enabled:
        return 0
    text = f"\x1b[{code}"
    sys.stdout.write(text)
    return len(text)


def format_command_columns(names: Sequence[str]) -> List[str]:
    """Lay out command names in columns, filled top to bottom.

    Every name is padded to the widest name plus two spaces and the row
    fits in 72 columns where possible.
    """
    total = len(names)
    if not total:
        return []
    width = max(len(name) for name in names) + 2
    cols = max(1, HELP_WIDTH // width)
    rows = math.ceil(total / cols)
    lines: List[str] = []
    for row in range(rows):
        cells: List[str] = []
        for col in range(cols):
            index = col * rows + row
            if index >= total:
                break
            cells.append(names[index].ljust(width))
        lines.append(HELP_INDENT + "".join(cells))
    return lines


def format_command_list(names: Sequence[str]) -> List[str]:
    return ["Available commands:", *format_command_columns(names), *HELP_TRAILER]


def format_option_topic(option: Option) -> List[str]:
    lines = [f"OPTION: {option.name} ({type_text(option.type)})"]
    if option.help:
        lines.extend(option.help.rstrip("\n").splitlines())
    return lines


__all__ = [
    "colorize",
    "emit_error",
    "emit_result",
    "format_command_columns",
    "format_command_list",
    "format_option_topic",
    "register_options",
]
