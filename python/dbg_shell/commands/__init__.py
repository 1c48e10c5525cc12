"""Command registry for dbg-shell."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .base import Command, FunctionCommand
from .evaluate import EvalCommand
from .help import HelpCommand
from .opt import OptCommand
from .read import ReadCommand
from .sym import SymCommand


class CommandRegistry:
    """Commands in registration order; names match case-insensitively."""

    def __init__(self) -> None:
        self._ordered: List[Command] = []

    def register(self, command: Command) -> Command:
        self._ordered.append(command)
        return command

    def find(self, name: str) -> Optional[Command]:
        needle = name.lower()
        for command in self._ordered:
            if command.name.lower() == needle:
                return command
        return None

    def list_commands(self) -> Iterable[Command]:
        return self._ordered

    def names(self) -> List[str]:
        return [command.name for command in self._ordered]

    def __len__(self) -> int:
        return len(self._ordered)


def build_registry(extra: Iterable[Command] = ()) -> CommandRegistry:
    """Create the registry with the built-in shell commands, then *extra*."""
    registry = CommandRegistry()
    commands = [
        EvalCommand(),
        HelpCommand(),
        OptCommand(),
        ReadCommand(),
        SymCommand(),
    ]
    commands.extend(extra)
    for command in commands:
        registry.register(command)
    return registry


__all__ = ["Command", "CommandRegistry", "FunctionCommand", "build_registry"]
