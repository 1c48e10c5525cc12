"""prompt_toolkit completer for dbg-shell."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .context import ShellContext

SYMBOL_LIMIT = 64
_SYM_SUBCMDS = ("load", "set", "del", "clear", "list")


def _tokens_before_cursor(text: str) -> List[str]:
    tokens = text.split()
    if not text or text[-1].isspace():
        tokens.append("")
    return tokens


class ShellCompleter(Completer):
    """Completes command, option and symbol names."""

    def __init__(self, ctx: ShellContext) -> None:
        self.ctx = ctx

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        tokens = _tokens_before_cursor(document.text_before_cursor)
        prefix = tokens[-1]
        for entry in self._candidates(tokens):
            yield Completion(entry, start_position=-len(prefix))

    def _candidates(self, tokens: List[str]) -> List[str]:
        prefix = tokens[-1]
        if len(tokens) == 1:
            return self._filter(self._command_names(), prefix)
        command = tokens[0].lower()
        position = len(tokens) - 1
        if command == "help" and position == 1:
            return self._filter(self._command_names() + self.ctx.options.names(), prefix)
        if command == "opt" and position == 1:
            return self._filter(self.ctx.options.names(), prefix)
        if command == "sym":
            if position == 1:
                return self._filter(_SYM_SUBCMDS, prefix)
            if tokens[1].lower() in ("set", "del") and position == 2:
                return self._symbol_names(prefix)
            return []
        if command == "=":
            return self._symbol_names(prefix)
        return []

    def _command_names(self) -> List[str]:
        registry = self.ctx.commands
        return list(registry.names()) if registry is not None else []

    def _symbol_names(self, prefix: str) -> List[str]:
        return self.ctx.symbols.complete_symbols(prefix)[:SYMBOL_LIMIT]

    @staticmethod
    def _filter(candidates: Iterable[str], prefix: str) -> List[str]:
        needle = prefix.lower()
        return sorted(dict.fromkeys(c for c in candidates if c.lower().startswith(needle)))
