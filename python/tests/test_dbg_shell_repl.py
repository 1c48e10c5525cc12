"""Tests for the read-eval loop and its line editors."""

from __future__ import annotations

import io
from typing import List, Optional

from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from dbg_shell.commands import FunctionCommand
from dbg_shell.history import HistoryStore
from dbg_shell.repl import LINE_BUF_SIZE, PROMPT, FallbackLineReader, PromptToolkitLineEditor, ShellREPL


class ScriptedEditor:
    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.history: List[str] = []

    def read_line(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def record_history(self, text: str) -> None:
        self.history.append(text)


def test_repl_shows_help_then_dispatches_until_eof(ctx, capsys):
    seen = []
    ctx.commands.register(FunctionCommand("probe", "", lambda shell, args: seen.append(shell.is_interactive())))
    editor = ScriptedEditor(["bogus", "opt color on", "probe"])
    assert ShellREPL(ctx, editor).run() == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("\nAvailable commands:\n")
    assert captured.out.endswith("Press Ctrl+D to quit.\n\n")
    assert "unknown command: bogus" in captured.err
    assert ctx.color_option.value is True
    assert seen == [True]
    assert editor.history == ["bogus", "opt color on", "probe"]
    assert editor.prompts == [PROMPT] * 4


def test_fallback_reader_returns_lines_then_eof():
    stdin = io.StringIO("opt\nhelp color\n")
    stdout = io.StringIO()
    reader = FallbackLineReader(stdin, stdout)
    assert reader.read_line(PROMPT) == "opt\n"
    assert reader.read_line(PROMPT) == "help color\n"
    assert reader.read_line(PROMPT) is None
    assert stdout.getvalue() == PROMPT * 3
    reader.record_history("opt")


def test_fallback_reader_splits_long_lines():
    stdin = io.StringIO("a" * 200 + "\n")
    reader = FallbackLineReader(stdin, io.StringIO())
    first = reader.read_line(PROMPT)
    second = reader.read_line(PROMPT)
    assert first == "a" * (LINE_BUF_SIZE - 1)
    assert second == "a" * (200 - LINE_BUF_SIZE + 1) + "\n"


class FlakyInput:
    def __init__(self) -> None:
        self.calls = 0

    def readline(self, size: int = -1) -> str:
        self.calls += 1
        if self.calls == 1:
            raise OSError("interrupted")
        return "help\n"


def test_fallback_reader_retries_after_read_error():
    stdout = io.StringIO()
    reader = FallbackLineReader(FlakyInput(), stdout)
    assert reader.read_line(PROMPT) == "help\n"
    assert stdout.getvalue() == PROMPT + "\n" + PROMPT


def test_prompt_toolkit_editor_reads_lines_and_records_history(tmp_path):
    store = HistoryStore(str(tmp_path / "history"), limit=10)
    with create_pipe_input() as pipe:
        editor = PromptToolkitLineEditor(history_store=store, input=pipe, output=DummyOutput())
        pipe.send_text("opt color\r")
        line = editor.read_line(PROMPT)
        assert line == "opt color"
        editor.record_history(line)
        pipe.send_text("\x04")
        assert editor.read_line(PROMPT) is None
    assert store.snapshot() == ["opt color"]


def test_prompt_toolkit_editor_ctrl_c_discards_line():
    with create_pipe_input() as pipe:
        editor = PromptToolkitLineEditor(input=pipe, output=DummyOutput())
        pipe.send_text("opt col\x03help\r")
        assert editor.read_line(PROMPT) == "help"
