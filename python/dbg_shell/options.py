"""Typed runtime options and the registry that holds them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from .expr import SymbolResolver, addr_exp

LOGGER = logging.getLogger("dbg_shell.options")

TEXT_CAPACITY = 128
NAME_WIDTH = 32

OptionValue = Union[bool, int, str]


class OptionType(enum.Enum):
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"


def type_text(option_type: OptionType) -> str:
    return option_type.value


def _default_value(option_type: OptionType) -> OptionValue:
    if option_type is OptionType.BOOLEAN:
        return False
    if option_type is OptionType.NUMERIC:
        return 0
    return ""


@dataclass(eq=False)
class Option:
    """A named setting owned by whichever subsystem registers it."""

    name: str
    type: OptionType
    help: str = ""
    value: Optional[OptionValue] = None
    capacity: int = TEXT_CAPACITY

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = _default_value(self.type)

    @property
    def enabled(self) -> bool:
        return bool(self.value)


def parse_boolean(word: str) -> bool:
    """Prefix-based truth test: ``1``-``9``, ``t...``, ``y...`` and ``on...`` are true."""
    first = word[:1]
    if first and first in "123456789":
        return True
    if first in ("t", "y"):
        return True
    return word[:2] == "on"


class OptionRegistry:
    """Options kept most-recent-first.

    Duplicate names are allowed; :meth:`find` returns the newest one.
    """

    def __init__(self, resolver: Optional[SymbolResolver] = None) -> None:
        self.resolver = resolver
        self._options: List[Option] = []

    def register(self, option: Option) -> Option:
        self._options.insert(0, option)
        return option

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def find(self, name: str) -> Optional[Option]:
        needle = name.lower()
        for option in self:
            if option.name.lower() == needle:
                return option
        return None

    def names(self) -> List[str]:
        return [option.name for option in self]

    def parse(self, option: Option, word: str) -> None:
        """Store *word* in *option* according to its type.

        Numeric values are address expressions and raise
        :class:`~dbg_shell.errors.AddressExpressionError` on failure, leaving
        the previous value untouched.
        """
        if option.type is OptionType.BOOLEAN:
            option.value = parse_boolean(word)
        elif option.type is OptionType.NUMERIC:
            option.value = addr_exp(word, self.resolver)
        else:
            option.value = word[: max(0, option.capacity - 1)]
        LOGGER.debug("option %s set to %r", option.name, option.value)

    @staticmethod
    def display(option: Option) -> str:
        if option.type is OptionType.BOOLEAN:
            rendered = "true" if option.value else "false"
        elif option.type is OptionType.NUMERIC:
            rendered = f"0x{option.value:x} ({option.value})"
        else:
            rendered = str(option.value)
        return f"{option.name:>{NAME_WIDTH}} = {rendered}"

    def display_all(self) -> List[str]:
        return [self.display(option) for option in self]


__all__ = [
    "Option",
    "OptionRegistry",
    "OptionType",
    "OptionValue",
    "TEXT_CAPACITY",
    "parse_boolean",
    "type_text",
]
