"""Tests for address expression evaluation."""

from __future__ import annotations

import pytest

from dbg_shell.errors import AddressExpressionError, UnknownTokenError
from dbg_shell.expr import AddressEvaluator, addr_exp
from dbg_shell.symbols import SymbolTable


@pytest.fixture
def symbols():
    table = SymbolTable()
    table.define("sym1", 0x1000)
    table.define("sym2", 0x0234)
    table.define("_start.1", 0x40)
    return table


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0x10+5", 21),
        ("10-0x5", 5),
        ("-1", 0xFFFF),
        ("0XfF", 0xFF),
        ("0x1g", 1),
        ("0x", 0),
        ("", 0),
        ("65536", 0),
        ("0x12345", 0x2345),
        ("0x0x1f", 0x1F),
        ("0X0Xa", 0xA),
        ("0x0xg", 0),
    ],
)
def test_numeric_expressions(text, expected):
    assert addr_exp(text) == expected


def test_symbols_are_summed(symbols):
    assert addr_exp("sym1+sym2", symbols) == 0x1234
    assert addr_exp("sym1 - 0x10", symbols) == 0x0FF0
    assert addr_exp("_start.1+1", symbols) == 0x41


def test_unknown_symbol_aborts_whole_expression(symbols, capsys):
    with pytest.raises(UnknownTokenError) as excinfo:
        addr_exp("sym1+missing", symbols)
    assert excinfo.value.token == "missing"
    assert str(excinfo.value) == "unknown token: missing"
    with pytest.raises(AddressExpressionError):
        addr_exp("foo")


def test_sign_persists_across_whitespace():
    assert addr_exp("10 - 3 4") == 3
    assert addr_exp("10 - 3 + 4") == 11
    assert addr_exp("1*2") == 3


def test_overlong_token_is_truncated():
    digits = "1" * 70
    assert addr_exp(digits) == int("1" * 63) & 0xFFFF


def test_evaluator_resets_between_calls(symbols):
    evaluator = AddressEvaluator(symbols)
    assert evaluator.evaluate("-5") == 0xFFFB
    assert evaluator.evaluate("5") == 5
    with pytest.raises(UnknownTokenError):
        evaluator.evaluate("nope 1")
    assert evaluator.evaluate("sym2") == 0x234
