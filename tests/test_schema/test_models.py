import pytest
from pydantic import ValidationError as PydanticValidationError

from clargs.schema import (
    CliConfig,
    CommandDef,
    ItemKind,
    OptionDef,
    OptionKind,
    ParseResult,
    Parser,
    PositionalDef,
    Transforms,
)


def test_option_def_coerces_kind_strings():
    option = OptionDef(type="bool", aliases=["v", "loud"])
    assert option.type is OptionKind.BOOLEAN
    assert option.short_aliases == ["v"]
    assert option.long_aliases == ["loud"]


def test_option_def_rejects_unknown_keys():
    with pytest.raises(PydanticValidationError):
        OptionDef(type="string", colour="red")


def test_option_def_is_strict():
    with pytest.raises(PydanticValidationError):
        OptionDef(type="string", hidden=1)
    with pytest.raises(PydanticValidationError):
        OptionDef(type="string", description=5)


def test_array_items_coerced():
    option = OptionDef(type="array", items="int")
    assert option.items is ItemKind.NUMBER


def test_positional_display_name():
    assert PositionalDef(type="string", name="file").display_name(0) == "file"
    assert PositionalDef(type="string").display_name(2) == "arg2"


def test_positional_is_optional():
    assert PositionalDef(type="string").is_optional
    assert not PositionalDef(type="string", required=True).is_optional
    assert not PositionalDef(type="string", default="x").is_optional


def test_parse_result_replace_returns_new_instance():
    result = ParseResult(values={"a": 1}, positionals=("x",))
    updated = result.replace(positionals=["y", "z"])
    assert updated.positionals == ("y", "z")
    assert result.positionals == ("x",)
    assert updated.values == {"a": 1}


def test_parse_result_is_frozen():
    result = ParseResult()
    with pytest.raises(AttributeError):
        result.command = "other"


def test_parser_accepts_transforms_mapping():
    def values(v):
        return v

    parser = Parser(transforms={"values": values})
    assert isinstance(parser.transforms, Transforms)
    assert parser.transforms.values is values
    assert parser.transforms.positionals is None


def test_cli_config_has_commands():
    assert not CliConfig(name="tool").has_commands
    config = CliConfig(name="tool", commands={"go": CommandDef(handler=print)})
    assert config.has_commands
    assert config.commands["go"].handler is print
