"""Persistent command history."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

LOGGER = logging.getLogger("dbg_shell.history")


class HistoryStore:
    """File-backed list of entered lines, oldest first, capped at *limit*."""

    def __init__(self, path: Optional[str], *, limit: int = 1000) -> None:
        self.limit = max(1, int(limit or 1))
        self.path = Path(path).expanduser() if path else None
        self.entries: List[str] = []
        if self.path:
            self._load()

    def _load(self) -> None:
        try:
            data = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("could not read history from %s: %s", self.path, exc)
            return
        lines = [line.strip() for line in data.splitlines() if line.strip()]
        self.entries = lines[-self.limit :]

    def append(self, line: str) -> bool:
        """Record *line*; returns False for blank lines and repeats of the last entry."""
        text = line.strip()
        if not text:
            return False
        if self.entries and self.entries[-1] == text:
            return False
        self.entries.append(text)
        del self.entries[: -self.limit]
        self._persist()
        return True

    def _persist(self) -> None:
        if not self.path:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("\n".join(self.entries) + "\n", encoding="utf-8")
        except OSError as exc:
            # history is best effort; keep the in-memory copy
            LOGGER.warning("could not write history to %s: %s", self.path, exc)

    def snapshot(self) -> List[str]:
        return list(self.entries)
