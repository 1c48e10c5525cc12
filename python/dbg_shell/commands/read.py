"""Command file execution."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..dispatch import Dispatcher
from ..output import emit_error
from ..parser import ArgCursor, get_arg


class ReadCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "read",
            "read <filename>\n"
            "    Process commands from a file. Blank lines and lines\n"
            "    beginning with '#' are ignored.",
        )

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        path = get_arg(args)
        if path is None:
            emit_error("read: filename must be specified")
            return 1
        return Dispatcher(ctx).run_file(path)
