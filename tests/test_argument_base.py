import io
from dataclasses import dataclass, field
from typing import List

import pytest

from argwright.argument_base import (
    ArgumentInfo,
    CommandLineArgumentBase,
    ParsingMode,
    SetValueResult,
)


@dataclass
class FakeParser:
    mode: ParsingMode = ParsingMode.DEFAULT
    long_prefix: str = "--"
    prefixes: List[str] = field(default_factory=lambda: ["-", "/"])


class StringArgument(CommandLineArgumentBase):
    def __init__(self, parser, info):
        super().__init__(parser, info)
        self.value = None

    @property
    def is_switch(self):
        return False

    def set_value(self, value, parser):
        self.value = value
        self._mark_has_value()
        return SetValueResult.SUCCESS

    def apply_default_value(self):
        pass

    def set_switch_value(self, parser):
        return SetValueResult.ERROR

    def write_default_value(self, stream):
        return stream

    @property
    def has_default_value(self):
        return False


def test_default_mode_clears_short_names():
    info = ArgumentInfo("Arg1", short_name="a", short_aliases=["b"], has_long_name=False)
    arg = StringArgument(FakeParser(), info)
    assert arg.short_name is None
    assert arg.has_short_name is False
    assert arg.has_long_name is True
    assert arg.short_aliases == []
    assert arg.name == "Arg1"


def test_info_is_not_mutated():
    info = ArgumentInfo("Arg1", aliases=["x"], short_aliases=["b"], short_name="a")
    StringArgument(FakeParser(), info)
    assert info.short_aliases == ["b"]
    assert info.short_name == "a"


def test_long_short_requires_a_name():
    parser = FakeParser(mode=ParsingMode.LONG_SHORT)
    with pytest.raises(ValueError):
        StringArgument(parser, ArgumentInfo("foo", has_long_name=False))

    # The same argument with a short name is accepted and named by it.
    arg = StringArgument(parser, ArgumentInfo("foo", short_name="f", has_long_name=False))
    assert arg.name == "f"
    assert arg.has_long_name is False


def test_long_short_short_only_uses_short_name():
    info = ArgumentInfo("switch3", short_name="u", has_long_name=False, aliases=["x"])
    arg = StringArgument(FakeParser(mode=ParsingMode.LONG_SHORT), info)
    assert arg.name == "u"
    assert arg.has_long_name is False
    assert arg.aliases == []
    assert arg.short_or_long_name == "u"


def test_long_short_without_short_name_drops_short_aliases():
    info = ArgumentInfo("bar", short_aliases=["c"])
    arg = StringArgument(FakeParser(mode=ParsingMode.LONG_SHORT), info)
    assert arg.short_aliases == []
    assert arg.has_short_name is False
    assert arg.short_or_long_name == "bar"


def test_long_short_keeps_short_name_and_aliases():
    info = ArgumentInfo("arg2", short_name="a", short_aliases=["b"])
    arg = StringArgument(FakeParser(mode=ParsingMode.LONG_SHORT), info)
    assert arg.short_name == "a"
    assert arg.short_aliases == ["b"]
    assert arg.short_or_long_name == "a"


def test_name_with_prefix_default_mode():
    parser = FakeParser()
    arg = StringArgument(parser, ArgumentInfo("Arg1"))
    assert arg.name_with_prefix(parser) == "-Arg1"


def test_name_with_prefix_long_short():
    parser = FakeParser(mode=ParsingMode.LONG_SHORT)
    long_arg = StringArgument(parser, ArgumentInfo("foo", short_name="f"))
    short_arg = StringArgument(parser, ArgumentInfo("u", short_name="u", has_long_name=False))
    assert long_arg.name_with_prefix(parser) == "--foo"
    assert short_arg.name_with_prefix(parser) == "-u"


def test_has_value_and_reset():
    parser = FakeParser()
    arg = StringArgument(parser, ArgumentInfo("Arg1"))
    assert arg.has_value is False
    assert arg.set_value("Value1", parser) is SetValueResult.SUCCESS
    assert arg.has_value is True
    assert arg.value == "Value1"
    arg.reset()
    assert arg.has_value is False


def test_descriptive_fields_pass_through():
    info = ArgumentInfo(
        "Arg1",
        value_description="number",
        description="Some text.",
        position=1,
        is_required=True,
        cancel_parsing=True,
        aliases=["a1"],
    )
    arg = StringArgument(FakeParser(), info)
    assert arg.value_description == "number"
    assert arg.description == "Some text."
    assert arg.position == 1
    assert arg.is_required is True
    assert arg.cancel_parsing is True
    assert arg.aliases == ["a1"]
    assert arg.is_multi_value is False


def test_switch_value_and_default_stream():
    parser = FakeParser()
    arg = StringArgument(parser, ArgumentInfo("Arg1"))
    assert arg.set_switch_value(parser) is SetValueResult.ERROR
    stream = io.StringIO()
    assert arg.write_default_value(stream) is stream
    assert stream.getvalue() == ""


def test_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CommandLineArgumentBase(FakeParser(), ArgumentInfo("Arg1"))  # type: ignore[abstract]