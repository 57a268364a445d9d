import pytest

from fieldx.args.default import DefaultArg, OptionalDefaultArg
from fieldx.args.meta import ArgumentError, MetaList, Path, parse_meta


def items(text):
    return parse_meta(text).items


def test_int_value():
    arg = DefaultArg.from_list(items("default(42)"))
    assert arg.value == 42
    assert arg.is_true() is True
    assert arg.has_value() is True
    assert arg.is_str() is False


def test_string_value():
    arg = DefaultArg.from_meta('default("hello")')
    assert arg.is_str() is True
    assert arg.as_str() == "hello"


def test_expression_value():
    arg = DefaultArg.from_meta("default(Type::func())")
    assert arg.value == MetaList(Path(("Type", "func")), "")


def test_off_with_value():
    arg = DefaultArg.from_list(items("default(off, 3)"))
    assert arg.is_true() is False
    assert arg.value == 3


def test_single_off_is_a_value():
    arg = DefaultArg.from_list(items("default(off)"))
    assert arg.is_true() is True
    assert arg.value == Path(("off",))


def test_bad_first_of_two():
    with pytest.raises(ArgumentError, match="The first argument can only be 'off' keyword"):
        DefaultArg.from_list(items("default(foo, 3)"))


def test_too_many():
    with pytest.raises(ArgumentError, match="Too many items"):
        DefaultArg.from_list(items("default(off, 1, 2)"))


def test_empty_list():
    with pytest.raises(ArgumentError, match="Too few items"):
        DefaultArg.from_list([])
    arg = OptionalDefaultArg.from_list([])
    assert arg.has_value() is False
    assert arg.is_true() is True


def test_from_word():
    with pytest.raises(ArgumentError, match="The actual default value is required"):
        DefaultArg.from_word()
    arg = OptionalDefaultArg.from_meta("default")
    assert arg.value is None
    assert arg.is_true() is True


def test_as_str_rejects_non_string():
    with pytest.raises(ArgumentError, match="The default value must be a string"):
        DefaultArg.from_meta("default(12)").as_str()
    with pytest.raises(ArgumentError, match="The default value must be a string"):
        DefaultArg.from_meta("default('c')").as_str()