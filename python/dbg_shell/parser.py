"""Word-splitting helpers shared by every command handler."""

from __future__ import annotations

from typing import Optional

# C locale whitespace; other Unicode spaces are part of a word
SPACE = " \t\n\v\f\r"


class ArgCursor:
    """Mutable read position over a command's argument text.

    Handlers receive one of these and pull words off the front with
    :func:`get_arg`; whatever is left is available via :attr:`remaining`.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str = "", pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def __bool__(self) -> bool:
        return not self.at_end()

    def __repr__(self) -> str:
        return f"ArgCursor({self.remaining!r})"


def get_arg(cursor: Optional[ArgCursor]) -> Optional[str]:
    """Return the next whitespace-delimited word and advance *cursor*.

    The cursor is left on the first character of the following word (or at
    the end of the text). Returns ``None`` if only whitespace remains.
    """
    if cursor is None:
        return None
    text = cursor.text
    end = len(text)
    start = cursor.pos
    while start < end and text[start] in SPACE:
        start += 1
    if start >= end:
        cursor.pos = end
        return None
    stop = start
    while stop < end and text[stop] not in SPACE:
        stop += 1
    word = text[start:stop]
    while stop < end and text[stop] in SPACE:
        stop += 1
    cursor.pos = stop
    return word


__all__ = ["ArgCursor", "SPACE", "get_arg"]
