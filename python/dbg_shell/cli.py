"""dbg-shell CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .commands import build_registry
from .completion import ShellCompleter
from .context import ShellContext
from .dispatch import Dispatcher
from .errors import SymbolFileError
from .history import HistoryStore
from .output import emit_error
from .repl import FallbackLineReader, LineEditor, PromptToolkitLineEditor, ShellREPL

LOG = logging.getLogger("dbg_shell.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dbg-shell", description="Debugger command shell")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Execute a command non-interactively (repeatable; quote the command string)",
    )
    parser.add_argument("--script", type=Path, help="Execute commands from a file non-interactively")
    parser.add_argument("--symbols", type=Path, help="Load a .sym symbol file at startup")
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".dbg-shell-history",
        help="Path to command history file (prompt_toolkit mode)",
    )
    parser.add_argument("--history-size", type=int, default=1000, help="Maximum history entries kept")
    parser.add_argument("--no-history", action="store_true", help="Do not read or write the history file")
    parser.add_argument("--plain", action="store_true", help="Read commands from stdin without line editing")
    parser.add_argument("--color", action="store_true", help="Enable the color option at startup")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("DBG_SHELL_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    return parser


def build_context(args: argparse.Namespace) -> ShellContext:
    ctx = ShellContext(commands=build_registry())
    if args.color:
        ctx.color_option.value = True
    if args.symbols:
        ctx.load_symbols(str(args.symbols))
    return ctx


def _make_editor(ctx: ShellContext, args: argparse.Namespace) -> LineEditor:
    if args.plain or not (sys.stdin.isatty() and sys.stdout.isatty()):
        return FallbackLineReader()
    store = None if args.no_history else HistoryStore(str(args.history), limit=args.history_size)
    return PromptToolkitLineEditor(history_store=store, completer=ShellCompleter(ctx))


def run_batch(ctx: ShellContext, commands: Sequence[str]) -> int:
    return Dispatcher(ctx).run_lines(commands)


def run_script(ctx: ShellContext, path: str) -> int:
    return Dispatcher(ctx).run_file(path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        ctx = build_context(args)
    except SymbolFileError as exc:
        emit_error(f"failed to load symbols: {exc}")
        return 1
    if args.script or args.command:
        status = 0
        if args.script:
            status |= run_script(ctx, str(args.script))
        if args.command:
            status |= run_batch(ctx, args.command)
        return status
    repl = ShellREPL(ctx, _make_editor(ctx, args))
    try:
        return repl.run()
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
