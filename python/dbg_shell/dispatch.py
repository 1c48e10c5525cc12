"""Command line dispatch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from .context import ShellContext
from .output import emit_error
from .parser import SPACE, ArgCursor, get_arg

if TYPE_CHECKING:  # pragma: no cover
    from .commands import Command

LOGGER = logging.getLogger("dbg_shell.dispatch")


class Dispatcher:
    """Resolves the first word of a line to a command and runs it."""

    def __init__(self, ctx: ShellContext) -> None:
        self.ctx = ctx
        self.last_status = 0

    def find_command(self, name: str) -> Optional["Command"]:
        registry = self.ctx.commands
        if registry is None:
            return None
        return registry.find(name)

    def process_command(self, line: str, interactive: bool = False) -> int:
        """Run one command line.

        Returns 0 when the line was empty or named a known command (even if
        that command then failed; see :attr:`last_status`), 1 for an unknown
        command.
        """
        args = ArgCursor(line.rstrip(SPACE))
        name = get_arg(args)
        if name is None:
            self.last_status = 0
            return 0
        command = self.find_command(name)
        if command is None:
            emit_error(f'unknown command: {name} (try "help")')
            self.last_status = 1
            return 1
        LOGGER.debug("dispatch %s interactive=%s args=%r", command.name, interactive, args.remaining)
        with self.ctx.interactive_call(interactive):
            try:
                status = command.run(self.ctx, args)
            except SystemExit:
                raise
            except Exception as exc:
                LOGGER.exception("command failed")
                emit_error(f"{command.name}: command failed: {exc}")
                status = 1
        self.last_status = int(status or 0)
        return 0

    def run_lines(self, lines: Iterable[str]) -> int:
        """Run a batch of lines non-interactively; 1 if any of them failed."""
        failed = False
        for raw in lines:
            line = raw.strip(SPACE)
            if not line or line.startswith("#"):
                continue
            if self.process_command(line, interactive=False) != 0 or self.last_status != 0:
                failed = True
        return 1 if failed else 0

    def run_file(self, path: str) -> int:
        script = Path(path).expanduser()
        try:
            text = script.read_text(encoding="utf-8")
        except OSError as exc:
            emit_error(f"read: {script}: {exc.strerror or exc}")
            return 1
        LOGGER.debug("running command file %s", script)
        return self.run_lines(text.splitlines())


__all__ = ["Dispatcher"]
