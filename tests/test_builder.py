import pytest

from fieldx.args.builder import BuilderHelper, StructBuilderHelper
from fieldx.args.meta import ArgumentError, NestingAttr, Path


def build(text, helper=BuilderHelper):
    return NestingAttr.from_meta(helper, text)


def test_keyword_defaults():
    helper = build("builder")
    assert helper.is_true() is True
    assert helper.is_into() is None
    assert helper.is_required() is None
    assert helper.is_builder_opt_in() is False
    assert helper.has_post_build() is False
    assert helper.error_type() is None
    assert helper.error_variant() is None


def test_name_and_flags():
    helper = build('builder("make", into, required(off))')
    assert helper.name == "make"
    assert helper.is_into() is True
    assert helper.is_required() is False


def test_into_off():
    assert build("builder(into(off))").is_into() is False


def test_off():
    assert build("builder(off)").is_true() is False


@pytest.mark.parametrize("param", ["error(crate::Error)", "post_build(done)", "opt_in"])
def test_struct_only_parameters_rejected_for_fields(param):
    with pytest.raises(ArgumentError, match="only supported at struct level"):
        build(f"builder({param})")


def test_struct_level_error_and_post_build():
    helper = build(
        "builder(error(crate::Error, crate::Error::Missing), post_build(done))",
        StructBuilderHelper,
    )
    assert helper.error_type() == Path(("crate", "Error"))
    assert helper.error_variant() == Path(("crate", "Error", "Missing"))
    assert helper.has_post_build() is True
    assert helper.post_build.value() == Path(("done",))


def test_error_type_without_variant():
    helper = build("builder(error(MyError))", StructBuilderHelper)
    assert helper.error_type() == Path(("MyError",))
    assert helper.error_variant() is None


def test_error_count_limits():
    with pytest.raises(ArgumentError, match="Too many items"):
        build("builder(error(a, b, c))", StructBuilderHelper)
    with pytest.raises(ArgumentError, match="Too few items"):
        build("builder(error())", StructBuilderHelper)


def test_post_build_keyword():
    helper = build("builder(post_build)", StructBuilderHelper)
    assert helper.has_post_build() is True
    assert helper.post_build.value() is None


def test_post_build_must_be_identifier():
    with pytest.raises(ArgumentError):
        build("builder(post_build(a::b))", StructBuilderHelper)


def test_opt_in_at_struct_level():
    assert build("builder(opt_in)", StructBuilderHelper).is_builder_opt_in() is True


def test_literal_limits():
    with pytest.raises(ArgumentError, match="Too many literal arguments for builder"):
        build('builder("a", "b")')
    with pytest.raises(ArgumentError):
        build("builder(1)")


def test_visibility_conflict():
    with pytest.raises(ArgumentError, match="Conflicting arguments"):
        build("builder(public, private)")


def test_public_mode():
    assert build("builder(public(crate))").public_mode().kind == "crate"


def test_unknown_field():
    with pytest.raises(ArgumentError, match="Unknown field"):
        build("builder(bogus)")


def test_attributes_impl():
    helper = build("builder(attributes_impl(inline))")
    assert helper.attributes_impl.list == ["#[inline]"]