"""Shared shell state handed to every command."""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from .errors import SymbolFileError
from .options import Option, OptionRegistry
from .output import register_options
from .symbols import SymbolTable

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandRegistry

LOGGER = logging.getLogger("dbg_shell.context")


@dataclass
class ShellContext:
    """Holds the registries and per-shell flags."""

    commands: Optional["CommandRegistry"] = None
    symbols: SymbolTable = field(default_factory=SymbolTable)
    options: OptionRegistry = field(init=False)
    interactive: bool = field(default=False, init=False)
    color_option: Option = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.options = OptionRegistry(resolver=self.symbols)
        self.color_option = register_options(self.options)

    @contextlib.contextmanager
    def interactive_call(self, interactive: bool) -> Iterator[None]:
        """Set the interactive flag for the duration of one command."""
        previous = self.interactive
        self.interactive = interactive
        try:
            yield
        finally:
            self.interactive = previous

    def is_interactive(self) -> bool:
        return self.interactive

    def load_symbols(self, path: Optional[str]) -> int:
        if not path:
            return 0
        try:
            return self.symbols.load(Path(path))
        except SymbolFileError as exc:
            LOGGER.debug("failed to load symbols: %s", exc)
            raise
