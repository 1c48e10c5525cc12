"""Help command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..output import emit_error, emit_result, format_command_list, format_option_topic
from ..parser import ArgCursor, get_arg


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "help",
            "help [command]\n"
            "    Without arguments, displays a list of commands. With a\n"
            "    command or option name as an argument, displays help\n"
            "    for that command or option.",
        )

    def run(self, ctx: ShellContext, args: ArgCursor) -> int:
        registry = ctx.commands
        if registry is None:
            return 1
        topic = get_arg(args)
        if topic is None:
            for line in format_command_list(registry.names()):
                emit_result(line)
            return 0
        command = registry.find(topic)
        option = ctx.options.find(topic)
        if command is None and option is None:
            emit_error(f"help: unknown topic: {topic}")
            return 1
        if command is not None:
            for line in command.help_lines():
                emit_result(line)
            if option is not None:
                emit_result("")
        if option is not None:
            for line in format_option_topic(option):
                emit_result(line)
        return 0
