"""Address expression evaluation.

An address expression is a sum of signed terms.  Each term is a decimal
number, a ``0x`` prefixed hexadecimal number, or a symbol name looked up
through a :class:`SymbolResolver`.  The result is wrapped to the 16-bit
address space.
"""

from __future__ import annotations

import logging
import string
from typing import List, Optional, Protocol

from .errors import UnknownTokenError

LOGGER = logging.getLogger("dbg_shell.expr")

ADDRESS_MASK = 0xFFFF
TOKEN_MAX = 63

_TOKEN_PUNCT = frozenset("_$.:")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


class SymbolResolver(Protocol):
    def lookup(self, name: str) -> Optional[int]:
        ...


def _is_token_char(ch: str) -> bool:
    return ch in _ALNUM or ch in _TOKEN_PUNCT


def _parse_hex_prefix(text: str) -> int:
    # one repeated 0x prefix is skipped: "0x0x1f" is 0x1f
    if text[:2].lower() == "0x" and text[2:3] in _HEX_DIGITS:
        text = text[2:]
    digits: List[str] = []
    for ch in text:
        if ch not in _HEX_DIGITS:
            break
        digits.append(ch)
    return int("".join(digits), 16) if digits else 0


class AddressEvaluator:
    """Single-pass evaluator for address expressions."""

    def __init__(self, resolver: Optional[SymbolResolver] = None) -> None:
        self.resolver = resolver
        self._token: List[str] = []
        self._sign = 1
        self._total = 0

    def evaluate(self, text: str) -> int:
        """Return the 16-bit value of *text*.

        Raises :class:`UnknownTokenError` if a term cannot be resolved.
        """
        self._token = []
        self._sign = 1
        self._total = 0
        for ch in text:
            if _is_token_char(ch):
                # overlong tokens are truncated, not rejected
                if len(self._token) < TOKEN_MAX:
                    self._token.append(ch)
                continue
            self._flush()
            if ch == "+":
                self._sign = 1
            elif ch == "-":
                self._sign = -1
        self._flush()
        return self._total & ADDRESS_MASK

    def _flush(self) -> None:
        if not self._token:
            return
        token = "".join(self._token)
        self._token = []
        self._total += self._sign * self._classify(token)

    def _classify(self, token: str) -> int:
        if token.isdigit():
            return int(token)
        if token[0] == "0" and token[1:2].lower() == "x":
            return _parse_hex_prefix(token[2:])
        value = self.resolver.lookup(token) if self.resolver is not None else None
        if value is None:
            LOGGER.debug("unresolved token %r", token)
            raise UnknownTokenError(token)
        return int(value)


def addr_exp(text: str, resolver: Optional[SymbolResolver] = None) -> int:
    """Evaluate *text* as an address expression."""
    return AddressEvaluator(resolver).evaluate(text)


__all__ = ["ADDRESS_MASK", "AddressEvaluator", "SymbolResolver", "addr_exp"]
