"""Expression evaluation command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..errors import AddressExpressionError
from ..expr import addr_exp
from ..output import emit_error, emit_result
from ..parser import ArgCursor


class EvalCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "=",
            "= <expression>\n"
            "    Evaluate an address expression and show the result in hex\n"
            "    and decimal, along with any symbol at that address.",
        )

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        text = args.remaining
        if not text:
            emit_error("=: expected an expression")
            return 1
        try:
            value = addr_exp(text, ctx.symbols)
        except AddressExpressionError as exc:
            emit_error(str(exc))
            return 1
        message = f"0x{value:04x} ({value})"
        names = ctx.symbols.names_at(value)
        if names:
            message += f" {names[0]}"
        emit_result(message)
        return 0
