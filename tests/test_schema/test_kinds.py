import pytest

from clargs.schema import ItemKind, OptionKind, PositionalKind


def test_option_kind_values():
    assert OptionKind("string") is OptionKind.STRING
    assert OptionKind("count") is OptionKind.COUNT
    assert str(OptionKind.ENUM) == "enum"


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("bool", OptionKind.BOOLEAN),
        ("flag", OptionKind.BOOLEAN),
        ("int", OptionKind.NUMBER),
        ("float", OptionKind.NUMBER),
        ("choice", OptionKind.ENUM),
        ("list", OptionKind.ARRAY),
        ("  STR ", OptionKind.STRING),
    ],
)
def test_option_kind_aliases(alias, expected):
    assert OptionKind(alias) is expected


def test_positional_kind_aliases():
    assert PositionalKind("rest") is PositionalKind.VARIADIC
    assert PositionalKind("int") is PositionalKind.NUMBER


def test_invalid_kind_lists_choices():
    with pytest.raises(ValueError, match="must be one of: string, boolean, number"):
        OptionKind("widget")


def test_non_string_kind_is_rejected():
    with pytest.raises(ValueError):
        ItemKind(5)


def test_takes_value_and_repeatable():
    assert OptionKind.STRING.takes_value
    assert not OptionKind.BOOLEAN.takes_value
    assert not OptionKind.COUNT.takes_value
    assert OptionKind.ARRAY.repeatable
    assert OptionKind.COUNT.repeatable
    assert not OptionKind.ENUM.repeatable


def test_choices():
    assert ItemKind.choices() == ["string", "number"]
    assert PositionalKind.choices() == ["string", "number", "enum", "variadic"]
