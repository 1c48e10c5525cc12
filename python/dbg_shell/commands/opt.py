"""Option inspection and assignment command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..errors import AddressExpressionError
from ..output import emit_error, emit_result
from ..parser import ArgCursor, get_arg


class OptCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "opt",
            "opt [name] [value]\n"
            "    Query or set option variables. With no arguments, displays\n"
            "    all available options.",
        )

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        name = get_arg(args)
        if name is None:
            for line in ctx.options.display_all():
                emit_result(line)
            return 0
        option = ctx.options.find(name)
        if option is None:
            emit_error(f"opt: no such option: {name}")
            return 1
        value = args.remaining
        if not value:
            emit_result(ctx.options.display(option))
            return 0
        try:
            ctx.options.parse(option, value)
        except AddressExpressionError as exc:
            emit_error(str(exc))
            emit_error(f"opt: can't parse option: {value}")
            return 1
        return 0
