"""Tests for the option registry."""

from __future__ import annotations

import pytest

from dbg_shell.errors import UnknownTokenError
from dbg_shell.options import Option, OptionRegistry, OptionType, parse_boolean, type_text
from dbg_shell.symbols import SymbolTable


@pytest.mark.parametrize(
    "word, expected",
    [
        ("1", True),
        ("9", True),
        ("0", False),
        ("true", True),
        ("t", True),
        ("yes", True),
        ("y", True),
        ("on", True),
        ("onwards", True),
        ("off", False),
        ("o", False),
        ("no", False),
        ("false", False),
        ("True", False),
        ("", False),
        ("\u0663", False),
    ],
)
def test_boolean_parse_table(word, expected):
    assert parse_boolean(word) is expected


def test_register_prepends_and_first_match_wins():
    registry = OptionRegistry()
    first = registry.register(Option("alpha", OptionType.BOOLEAN))
    second = registry.register(Option("beta", OptionType.NUMERIC))
    shadow = registry.register(Option("ALPHA", OptionType.TEXT))
    assert list(registry) == [shadow, second, first]
    assert registry.find("alpha") is shadow
    assert registry.find("Beta") is second
    assert registry.find("gamma") is None
    assert len(registry) == 3


def test_numeric_parse_and_display():
    registry = OptionRegistry()
    option = registry.register(Option("base", OptionType.NUMERIC, help="Base address."))
    registry.parse(option, "0x2000")
    assert option.value == 0x2000
    assert registry.display(option) == f"{'base':>32} = 0x2000 (8192)"


def test_numeric_parse_uses_symbols_and_keeps_value_on_error():
    symbols = SymbolTable()
    symbols.define("main", 0x100)
    registry = OptionRegistry(resolver=symbols)
    option = registry.register(Option("base", OptionType.NUMERIC, value=7))
    registry.parse(option, "main+4")
    assert option.value == 0x104
    with pytest.raises(UnknownTokenError):
        registry.parse(option, "main+nothing")
    assert option.value == 0x104


def test_text_option_truncates_to_capacity():
    registry = OptionRegistry()
    option = registry.register(Option("prompt", OptionType.TEXT, capacity=8))
    registry.parse(option, "abcdefghij")
    assert option.value == "abcdefg"
    assert registry.display(option).endswith(" = abcdefg")


def test_display_all_follows_registry_order():
    registry = OptionRegistry()
    registry.register(Option("color", OptionType.BOOLEAN))
    registry.register(Option("name", OptionType.TEXT, value="demo"))
    assert registry.display_all() == [
        f"{'name':>32} = demo",
        f"{'color':>32} = false",
    ]


def test_type_text_names():
    assert [type_text(t) for t in OptionType] == ["boolean", "numeric", "text"]
