"""Interactive read-eval loop for dbg-shell."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from .context import ShellContext
from .dispatch import Dispatcher
from .history import HistoryStore

LOGGER = logging.getLogger("dbg_shell.repl")

PROMPT = "(dbg) "
LINE_BUF_SIZE = 128


class LineEditor(Protocol):
    def read_line(self, prompt: str) -> Optional[str]:
        ...

    def record_history(self, text: str) -> None:
        ...


class PromptToolkitLineEditor:
    """Line editing and history through prompt_toolkit."""

    def __init__(
        self,
        *,
        history_store: Optional[HistoryStore] = None,
        completer: Optional[Completer] = None,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self.history_store = history_store
        history = InMemoryHistory()
        if history_store is not None:
            for entry in history_store.snapshot():
                history.append_string(entry)
        self.session: PromptSession[str] = PromptSession(
            history=history,
            completer=completer,
            complete_while_typing=False,
            input=input,
            output=output,
        )

    def read_line(self, prompt: str) -> Optional[str]:
        while True:
            try:
                return self.session.prompt(prompt)
            except EOFError:
                return None
            except KeyboardInterrupt:
                # Ctrl+C abandons the current line only
                continue

    def record_history(self, text: str) -> None:
        if self.history_store is not None:
            self.history_store.append(text)


class FallbackLineReader:
    """Plain stdin reader used when no terminal is available."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def read_line(self, prompt: str) -> Optional[str]:
        stdin = self.stdin or sys.stdin
        stdout = self.stdout or sys.stdout
        while True:
            stdout.write(prompt)
            stdout.flush()
            try:
                line = stdin.readline(LINE_BUF_SIZE - 1)
            except (OSError, UnicodeDecodeError, KeyboardInterrupt) as exc:
                LOGGER.debug("read failed, retrying: %r", exc)
                stdout.write("\n")
                continue
            if not line:
                return None
            return line

    def record_history(self, text: str) -> None:
        pass


class ShellREPL:
    """Reads lines until end of input and dispatches them interactively."""

    def __init__(self, ctx: ShellContext, editor: LineEditor, *, dispatcher: Optional[Dispatcher] = None) -> None:
        self.ctx = ctx
        self.editor = editor
        self.dispatcher = dispatcher or Dispatcher(ctx)

    def run(self) -> int:
        print()
        if self.dispatcher.find_command("help") is not None:
            self.dispatcher.process_command("help", interactive=True)
        while True:
            line = self.editor.read_line(PROMPT)
            if line is None:
                break
            self.editor.record_history(line)
            self.dispatcher.process_command(line, interactive=True)
        print()
        return 0


__all__ = [
    "FallbackLineReader",
    "LINE_BUF_SIZE",
    "LineEditor",
    "PROMPT",
    "PromptToolkitLineEditor",
    "ShellREPL",
]
