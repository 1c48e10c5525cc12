"""Symbol table management command."""

from __future__ import annotations

from pathlib import Path

from .base import Command
from ..context import ShellContext
from ..errors import AddressExpressionError, SymbolFileError
from ..expr import addr_exp
from ..output import emit_error, emit_result
from ..parser import ArgCursor, get_arg


class SymCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "sym",
            "sym load <filename>\n"
            "    Load symbols from a .sym file, merging with the current table.\n"
            "sym set <name> <value>\n"
            "    Set or overwrite the value of a symbol.\n"
            "sym del <name>\n"
            "    Delete a symbol.\n"
            "sym clear\n"
            "    Clear the symbol table.\n"
            "sym list [prefix]\n"
            "    List symbols, optionally only those starting with prefix.",
        )

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        action = get_arg(args)
        if action is None:
            emit_error("sym: need to specify a subcommand (try \"help sym\")")
            return 1
        action = action.lower()
        if action == "load":
            return self._handle_load(ctx, args)
        if action == "set":
            return self._handle_set(ctx, args)
        if action == "del":
            return self._handle_del(ctx, args)
        if action == "clear":
            ctx.symbols.clear()
            return 0
        if action == "list":
            return self._handle_list(ctx, args)
        emit_error(f"sym: unknown subcommand: {action}")
        return 1

    def _handle_load(self, ctx: ShellContext, args: ArgCursor) -> int:
        path = get_arg(args)
        if path is None:
            emit_error("sym: filename required to load symbols")
            return 1
        try:
            added = ctx.symbols.load(Path(path))
        except SymbolFileError as exc:
            emit_error(f"sym: failed to load symbols: {exc}")
            return 1
        emit_result(f"Loaded {added} symbols from {ctx.symbols.path}")
        return 0

    def _handle_set(self, ctx: ShellContext, args: ArgCursor) -> int:
        name = get_arg(args)
        value_text = args.remaining
        if name is None or not value_text:
            emit_error("sym: need a name and value to set symbol table entries")
            return 1
        try:
            value = addr_exp(value_text, ctx.symbols)
        except AddressExpressionError as exc:
            emit_error(str(exc))
            emit_error(f"sym: can't parse value: {value_text}")
            return 1
        ctx.symbols.define(name, value)
        return 0

    def _handle_del(self, ctx: ShellContext, args: ArgCursor) -> int:
        name = get_arg(args)
        if name is None:
            emit_error("sym: need a name to delete symbol table entries")
            return 1
        if not ctx.symbols.remove(name):
            emit_error(f"sym: can't delete nonexistent symbol: {name}")
            return 1
        return 0

    def _handle_list(self, ctx: ShellContext, args: ArgCursor) -> int:
        prefix = get_arg(args) or ""
        for name, address in ctx.symbols.items(prefix):
            emit_result(f"0x{address:04x}: {name}")
        return 0
