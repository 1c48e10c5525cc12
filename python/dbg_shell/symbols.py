"""Symbol table used to resolve names in address expressions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import SymbolFileError
from .expr import ADDRESS_MASK

LOGGER = logging.getLogger("dbg_shell.symbols")


class SymbolTable:
    """Name to 16-bit address map, optionally filled from a .sym file.

    Names are case-sensitive.  A name bound more than once keeps its first
    address for lookups.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path: Optional[Path] = None
        self._symbol_map: Dict[str, List[int]] = {}
        if path is not None:
            self.load(path)

    def __len__(self) -> int:
        return len(self._symbol_map)

    def __contains__(self, name: str) -> bool:
        return name in self._symbol_map

    def load(self, path: Path) -> int:
        """Merge symbols from a JSON .sym file; returns the number of names added."""
        candidate = Path(path).expanduser()
        try:
            data = json.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SymbolFileError(f"{candidate}: {exc}") from exc
        before = len(self._symbol_map)
        symbols_block = data.get("symbols") if isinstance(data, dict) else None
        if isinstance(symbols_block, dict):
            self._load_functions(symbols_block.get("functions") or [])
            self._load_labels(symbols_block.get("labels") or {})
            self._load_variables(symbols_block.get("variables") or [])
        elif isinstance(symbols_block, list):
            self._load_variables(symbols_block)
        self.path = candidate
        added = len(self._symbol_map) - before
        LOGGER.debug("loaded %d symbols from %s", added, candidate)
        return added

    def _load_functions(self, entries: Sequence[dict]) -> None:
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = entry.get("name")
            addr = entry.get("address")
            if not isinstance(name, str) or addr is None:
                continue
            self._bind(name, int(addr))

    def _load_labels(self, labels: dict) -> None:
        if not isinstance(labels, dict):
            return
        for key, names in labels.items():
            try:
                addr = int(key, 0)
            except (TypeError, ValueError):
                continue
            if isinstance(names, list):
                for name in names:
                    if isinstance(name, str):
                        self._bind(name, addr)

    def _load_variables(self, entries: Sequence[dict]) -> None:
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = entry.get("name")
            addr = entry.get("address")
            if addr is None:
                addr = entry.get("value")
            if not isinstance(name, str) or addr is None:
                continue
            try:
                addr_int = int(addr, 0) if isinstance(addr, str) else int(addr)
            except (TypeError, ValueError):
                continue
            self._bind(name, addr_int)

    def _bind(self, name: str, address: int) -> None:
        self._symbol_map.setdefault(name, []).append(address & ADDRESS_MASK)

    def define(self, name: str, address: int) -> None:
        """Bind *name* to *address*, replacing any earlier binding."""
        self._symbol_map[name] = [int(address) & ADDRESS_MASK]

    def remove(self, name: str) -> bool:
        return self._symbol_map.pop(name, None) is not None

    def clear(self) -> None:
        self._symbol_map.clear()
        self.path = None

    def lookup(self, name: str) -> Optional[int]:
        addresses = self._symbol_map.get(name)
        return addresses[0] if addresses else None

    def names_at(self, address: int) -> List[str]:
        address &= ADDRESS_MASK
        return sorted(name for name, addrs in self._symbol_map.items() if address in addrs)

    def items(self, prefix: str = "") -> List[Tuple[str, int]]:
        return [(name, self._symbol_map[name][0]) for name in self.complete_symbols(prefix)]

    def complete_symbols(self, prefix: str = "") -> List[str]:
        if not prefix:
            return sorted(self._symbol_map.keys())
        needle = prefix.lower()
        return sorted(name for name in self._symbol_map if name.lower().startswith(needle))

    def update(self, entries: Iterable[Tuple[str, int]]) -> None:
        for name, address in entries:
            self.define(name, address)


__all__ = ["SymbolTable"]
