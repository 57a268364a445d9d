"""Parameters of the builder pattern and of the builder object."""

from __future__ import annotations

from typing import Any, ClassVar

from fieldx.args.attributes import Attributes
from fieldx.args.helpers import HelperBase
from fieldx.args.meta import ArgumentError, MetaList, NestingAttr, Path
from fieldx.args.syn_value import Punctuated, SynValueArg
from fieldx.args.value import BoolFlag


class _IdentArg(SynValueArg):
    """A single identifier, or a bare keyword."""

    AS_KEYWORD = True

    @classmethod
    def _parse(cls, item: MetaList) -> Any:
        value = super()._parse(item)
        if not (isinstance(value, Path) and len(value.segments) == 1):
            raise ArgumentError("an identifier is expected")
        return value


class _ErrorArg(SynValueArg):
    """One or two paths: the error type and, optionally, its unset-field variant."""

    @classmethod
    def _parse(cls, item: MetaList) -> Punctuated:
        paths = Punctuated.from_meta(item, 1, 2)
        if not all(isinstance(path, Path) for path in paths):
            raise ArgumentError("error type and variant must be paths")
        return paths


class BuilderHelper(HelperBase):
    """The ``builder`` argument at field level."""

    STRUCT: ClassVar[bool] = False
    HELPER_NAME: ClassVar[str] = "builder"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.attributes_impl: Attributes | None = None
        self.into: NestingAttr | None = None
        self.required: NestingAttr | None = None
        self.opt_in: NestingAttr | None = None
        self.post_build: NestingAttr | None = None
        self.error: NestingAttr | None = None

    def _apply(self, key: str, item: Any) -> bool:
        if key == "attributes_impl":
            self.attributes_impl = Attributes.from_meta(item)
        elif key in ("into", "required", "opt_in"):
            setattr(self, key, NestingAttr.from_meta(BoolFlag, item))
        elif key == "post_build":
            self.post_build = NestingAttr.from_meta(_IdentArg, item)
        elif key == "error":
            self.error = NestingAttr.from_meta(_ErrorArg, item)
        else:
            return super()._apply(key, item)
        return True

    @classmethod
    def from_list(cls, items: list[Any]) -> "BuilderHelper":
        helper = super().from_list(items)
        helper.validate()
        return helper

    @classmethod
    def for_keyword(cls, path: Path) -> "BuilderHelper":
        return cls()

    def set_literals(self, literals: list[Any]) -> "BuilderHelper":
        return super().set_literals(literals)

    def is_into(self) -> bool | None:
        """Whether builder setters coerce their arguments; None if unspecified."""
        return None if self.into is None else self.into.is_true()

    def is_required(self) -> bool | None:
        """Whether a value must be given to the builder; None if unspecified."""
        return None if self.required is None else self.required.is_true()

    def is_builder_opt_in(self) -> bool:
        """True if fields get builder setters only when asked for."""
        return self.opt_in is not None and self.opt_in.is_true()

    def has_post_build(self) -> bool:
        """True if a post-build hook was requested."""
        return self.post_build is not None

    def _error_paths(self) -> list[Path]:
        return [] if self.error is None else self.error.value().items()

    def error_type(self) -> Path | None:
        """The error type the builder reports with."""
        paths = self._error_paths()
        return paths[0] if paths else None

    def error_variant(self) -> Path | None:
        """The error variant used for an unset field."""
        paths = self._error_paths()
        return paths[1] if len(paths) > 1 else None

    def validate(self) -> None:
        """Reject struct-only parameters at field level."""
        if self.STRUCT:
            return
        for name in ("error", "post_build", "opt_in"):
            if getattr(self, name) is not None:
                raise ArgumentError(f"parameter '{name}' is only supported at struct level")


class StructBuilderHelper(BuilderHelper):
    """The ``builder`` argument at struct level."""

    STRUCT = True