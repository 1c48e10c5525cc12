"""Completion tests for dbg-shell."""

from __future__ import annotations

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from dbg_shell.completion import ShellCompleter


def _complete(ctx, text):
    completer = ShellCompleter(ctx)
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, CompleteEvent())]


def test_command_completion(ctx):
    assert _complete(ctx, "he") == ["help"]
    assert _complete(ctx, "") == ["=", "help", "opt", "read", "sym"]


def test_help_completes_commands_and_options(ctx):
    assert _complete(ctx, "help c") == ["color"]
    assert "sym" in _complete(ctx, "help ")


def test_opt_completes_option_names(ctx):
    assert _complete(ctx, "opt CO") == ["color"]
    assert _complete(ctx, "opt color ") == []


def test_symbol_completion_for_expressions(ctx):
    assert _complete(ctx, "= ma") == ["main"]
    assert _complete(ctx, "sym del l") == ["loop"]
    assert _complete(ctx, "sym l") == ["list", "load"]


def test_completion_start_position(ctx):
    completer = ShellCompleter(ctx)
    doc = Document("opt col", cursor_position=7)
    (completion,) = list(completer.get_completions(doc, CompleteEvent()))
    assert completion.start_position == -3
