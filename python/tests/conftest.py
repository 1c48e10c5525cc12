"""
Pytest configuration and fixtures for dbg-shell tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))

from dbg_shell.commands import build_registry
from dbg_shell.context import ShellContext
from dbg_shell.dispatch import Dispatcher


@pytest.fixture
def ctx():
    """Shell context with the built-in commands and a couple of symbols."""
    context = ShellContext(commands=build_registry())
    context.symbols.define("main", 0x100)
    context.symbols.define("loop", 0x120)
    return context


@pytest.fixture
def dispatcher(ctx):
    return Dispatcher(ctx)
