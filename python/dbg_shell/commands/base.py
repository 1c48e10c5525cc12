"""Command base classes for dbg-shell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..context import ShellContext
from ..parser import ArgCursor

Handler = Callable[[ShellContext, ArgCursor], Optional[int]]


@dataclass
class Command:
    """Abstract command description."""

    name: str
    description: str

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        raise NotImplementedError("Command must implement run()")

    def help_lines(self) -> List[str]:
        lines = [f"COMMAND: {self.name}"]
        lines.extend(self.description.rstrip("\n").splitlines())
        return lines


class FunctionCommand(Command):
    """Adapts a plain ``func(ctx, args)`` callable to the command interface."""

    def __init__(self, name: str, description: str, func: Handler) -> None:
        super().__init__(name, description)
        self.func = func

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        return int(self.func(ctx, args) or 0)
