"""Exception types raised by the dbg-shell core."""

from __future__ import annotations


class ShellError(RuntimeError):
    """Base class for recoverable shell errors."""


class AddressExpressionError(ShellError):
    """Raised when an address expression cannot be evaluated."""


class UnknownTokenError(AddressExpressionError):
    """Raised when an expression term is neither a number nor a known symbol."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown token: {token}")
        self.token = token


class SymbolFileError(ShellError):
    """Raised when a symbol file cannot be read or decoded."""


__all__ = [
    "ShellError",
    "AddressExpressionError",
    "UnknownTokenError",
    "SymbolFileError",
]
