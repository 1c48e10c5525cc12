"""
dbg-shell package.

The interactive command shell of a debugger front-end: a command and option
registry, an address expression evaluator and a read-eval loop.  Use
``python -m dbg_shell`` or the ``dbg-shell`` script to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
