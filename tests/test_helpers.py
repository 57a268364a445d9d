import pytest

from fieldx.args.meta import ArgumentError, NestingAttr, Path
from fieldx.args.helpers import (
    AccessorHelper,
    AccessorMode,
    BaseHelper,
    Fallible,
    SetterHelper,
)
from fieldx.args.modes import PubMode


class FlagOnlyHelper(BaseHelper):
    BOOL_ONLY = True


def test_base_keyword():
    attr = NestingAttr.from_meta(BaseHelper, "reader")
    assert attr.is_true() is True
    assert attr.name is None
    assert attr.public_mode() is None


def test_base_name_literal():
    attr = NestingAttr.from_meta(BaseHelper, 'reader("read_it")')
    assert attr.name == "read_it"


def test_base_off():
    attr = NestingAttr.from_meta(BaseHelper, "reader(off)")
    assert attr.is_true() is False
    assert bool(attr.inner) is False


def test_base_public_crate():
    attr = NestingAttr.from_meta(BaseHelper, "reader(public(crate))")
    assert attr.public_mode() == PubMode("crate")


def test_base_private():
    attr = NestingAttr.from_meta(BaseHelper, "reader(private)")
    assert attr.public_mode() == PubMode("private")


def test_base_visibility_conflict():
    with pytest.raises(ArgumentError, match="Conflicting arguments"):
        NestingAttr.from_meta(BaseHelper, "reader(public, private)")


def test_base_private_off_keeps_public():
    attr = NestingAttr.from_meta(BaseHelper, "reader(public, private(off))")
    assert attr.public_mode() == PubMode("all")


def test_base_too_many_literals():
    with pytest.raises(ArgumentError, match="Too many literal arguments for helper"):
        NestingAttr.from_meta(BaseHelper, 'reader("a", "b")')


def test_base_unknown_and_duplicate():
    with pytest.raises(ArgumentError, match="Unknown field"):
        NestingAttr.from_meta(BaseHelper, "reader(bogus)")
    with pytest.raises(ArgumentError, match="Duplicate field"):
        NestingAttr.from_meta(BaseHelper, "reader(off, off)")


def test_bool_only_rejects_literals():
    with pytest.raises(ArgumentError, match="Literal values are not supported here"):
        NestingAttr.from_meta(FlagOnlyHelper, 'reader("name")')


def test_attributes_fn():
    attr = NestingAttr.from_meta(BaseHelper, "reader(attributes_fn(inline, allow(dead_code)))")
    assert attr.attributes_fn().list == ["#[inline]", "#[allow(dead_code)]"]
    assert attr.attributes is None


def test_accessor_modes():
    assert NestingAttr.from_meta(AccessorHelper, "get(clone)").mode() is AccessorMode.CLONE
    assert NestingAttr.from_meta(AccessorHelper, "get(copy)").mode() is AccessorMode.COPY
    assert NestingAttr.from_meta(AccessorHelper, "get(as_ref)").mode() is AccessorMode.AS_REF
    assert NestingAttr.from_meta(AccessorHelper, "get").mode() is None


def test_accessor_name_and_mode():
    attr = NestingAttr.from_meta(AccessorHelper, 'get("getter", clone)')
    assert attr.name == "getter"
    assert attr.mode() is AccessorMode.CLONE


def test_accessor_mode_conflict():
    with pytest.raises(ArgumentError, match="accessor mode"):
        NestingAttr.from_meta(AccessorHelper, "get(clone, copy)")


def test_accessor_literal_errors():
    with pytest.raises(ArgumentError, match="Too many literals"):
        NestingAttr.from_meta(AccessorHelper, 'get("a", "b")')
    with pytest.raises(ArgumentError, match="Unexpected type"):
        NestingAttr.from_meta(AccessorHelper, "get(1)")


def test_setter_into():
    assert NestingAttr.from_meta(SetterHelper, "set(into)").is_into() is True
    assert NestingAttr.from_meta(SetterHelper, "set(into = false)").is_into() is False
    assert NestingAttr.from_meta(SetterHelper, "set").is_into() is None


def test_setter_name_and_limits():
    attr = NestingAttr.from_meta(SetterHelper, 'set("assign", into)')
    assert attr.name == "assign"
    with pytest.raises(ArgumentError, match="Too many literal arguments for setter"):
        NestingAttr.from_meta(SetterHelper, 'set("a", "b")')


def test_fallible_keyword():
    attr = NestingAttr.from_meta(Fallible, "fallible")
    assert attr.is_true() is True
    assert attr.error_type() is None


def test_fallible_error_type():
    attr = NestingAttr.from_meta(Fallible, "fallible(error(crate::Error))")
    assert attr.error_type() == Path(("crate", "Error"))


def test_fallible_off():
    assert NestingAttr.from_meta(Fallible, "fallible(off)").is_true() is False


def test_fallible_errors():
    with pytest.raises(ArgumentError, match="argument is expected"):
        NestingAttr.from_meta(Fallible, "fallible(error)")
    with pytest.raises(ArgumentError, match="must implement set_literals"):
        NestingAttr.from_meta(Fallible, 'fallible("x")')