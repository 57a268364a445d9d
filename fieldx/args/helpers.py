"""Helper arguments: base, accessor and setter helpers, and the fallible flag."""

from __future__ import annotations

import enum
from typing import Any, ClassVar

from fieldx.args.attributes import Attributes
from fieldx.args.meta import ArgumentError, FromNestAttr, MetaList, NameValue, NestingAttr, Path, parse_meta, render_meta
from fieldx.args.modes import PubMode
from fieldx.args.util import public_mode as _public_mode
from fieldx.args.util import set_literals as _set_literals
from fieldx.args.util import validate_exclusives
from fieldx.args.value import BoolFlag


def _key(item: Any) -> str:
    return str(getattr(item, "path", item))


def _require_word(key: str, item: Any) -> None:
    if not isinstance(item, Path):
        raise ArgumentError(f"Unexpected meta-item format `{key}`")


class HelperBase(FromNestAttr):
    """Common sub-arguments of helpers: ``off``, a name literal, visibility and attributes."""

    BOOL_ONLY: ClassVar[bool] = False
    HELPER_NAME: ClassVar[str] = "helper"
    _EXCLUSIVES: ClassVar[dict] = {"visibility": (("public",), ("private",))}

    def __init__(
        self,
        off: bool = False,
        name: str | None = None,
        public: Any = None,
        private: Any = None,
        attributes: Attributes | None = None,
        attributes_fn: Attributes | None = None,
    ) -> None:
        self.off = off
        self.name = name
        self.public = public
        self.private = private
        self.attributes = attributes
        self._attributes_fn = attributes_fn

    def _apply(self, key: str, item: Any) -> bool:
        if key == "off":
            _require_word(key, item)
            self.off = True
        elif key == "public":
            self.public = NestingAttr.from_meta(PubMode, item)
        elif key == "private":
            self.private = NestingAttr.from_meta(BoolFlag, item)
        elif key == "attributes":
            self.attributes = Attributes.from_meta(item)
        elif key == "attributes_fn":
            self._attributes_fn = Attributes.from_meta(item)
        else:
            return False
        return True

    @classmethod
    def from_list(cls, items: list[Any]) -> "HelperBase":
        helper = cls()
        seen = set()
        for item in items:
            key = _key(item)
            if key in seen:
                raise ArgumentError(f"Duplicate field `{key}`")
            seen.add(key)
            if not isinstance(item, (Path, MetaList, NameValue)) or not helper._apply(key, item):
                raise ArgumentError(f"Unknown field: `{key}`")
        validate_exclusives(helper, cls._EXCLUSIVES)
        return helper

    @classmethod
    def for_keyword(cls, path: Path) -> "HelperBase":
        return cls()

    def set_literals(self, literals: list[Any]) -> "HelperBase":
        if self.BOOL_ONLY:
            self.no_literals(literals)
        return _set_literals(self, self.HELPER_NAME, literals, {"name": str}, 0, 1)

    def is_true(self) -> bool:
        return not self.off

    def public_mode(self) -> PubMode | None:
        """Visibility of the generated helper, or None if not specified."""
        return _public_mode(self.public, self.private)

    def attributes_fn(self) -> Attributes | None:
        """Extra attributes for the generated helper method."""
        return self._attributes_fn

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, off={self.off})"


class BaseHelper(HelperBase):
    """Minimal helper, used for arguments like ``reader`` or ``writer``."""

    def __bool__(self) -> bool:
        return self.is_true()


class AccessorMode(enum.Enum):
    """What kind of value an accessor returns."""

    COPY = "copy"
    CLONE = "clone"
    AS_REF = "as_ref"
    NONE = "none"


class AccessorHelper(HelperBase):
    """Accessor helper: ``get``, ``get(copy)``, ``get("name", clone)``."""

    _EXCLUSIVES: ClassVar[dict] = {
        **HelperBase._EXCLUSIVES,
        "accessor mode": (("clone",), ("copy",), ("as_ref",)),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.clone = False
        self.copy = False
        self.as_ref = False

    def _apply(self, key: str, item: Any) -> bool:
        if key in ("clone", "copy", "as_ref"):
            _require_word(key, item)
            setattr(self, key, True)
            return True
        return super()._apply(key, item)

    def set_literals(self, literals: list[Any]) -> "AccessorHelper":
        if self.BOOL_ONLY:
            raise ArgumentError("Literal values are not supported here")
        if len(literals) > 1:
            raise ArgumentError("Too many literals")
        if literals:
            literal = literals[0]
            if type(literal) is not str:
                raise ArgumentError(f"Unexpected type `{render_meta(literal)}`")
            self.name = literal
        return self

    def mode(self) -> AccessorMode | None:
        """The requested accessor mode, or None."""
        if self.clone:
            return AccessorMode.CLONE
        if self.copy:
            return AccessorMode.COPY
        if self.as_ref:
            return AccessorMode.AS_REF
        return None


class SetterHelper(HelperBase):
    """Setter helper: ``set``, ``set(into)``, ``set("name", into = false)``."""

    HELPER_NAME: ClassVar[str] = "setter"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.into: bool | None = None

    def _apply(self, key: str, item: Any) -> bool:
        if key == "into":
            if isinstance(item, Path):
                self.into = True
            elif isinstance(item, NameValue) and isinstance(item.value, bool):
                self.into = item.value
            else:
                raise ArgumentError("Unexpected type for `into`: a boolean is expected")
            return True
        return super()._apply(key, item)

    def is_into(self) -> bool | None:
        """Whether the setter coerces its argument; None if unspecified."""
        return self.into


class Fallible(FromNestAttr):
    """Marks something as able to fail, optionally with ``error(path)`` naming the error type."""

    def __init__(self, off: bool = False, error: Path | None = None) -> None:
        self.off = off
        self._error = error

    @classmethod
    def from_list(cls, items: list[Any]) -> "Fallible":
        result = cls()
        seen = set()
        for item in items:
            key = _key(item)
            if key in seen:
                raise ArgumentError(f"Duplicate field `{key}`")
            seen.add(key)
            if key == "off":
                _require_word(key, item)
                result.off = True
            elif key == "error":
                if not isinstance(item, MetaList):
                    raise ArgumentError("argument is expected")
                target = parse_meta(item.tokens)
                if not isinstance(target, Path):
                    raise ArgumentError("error type must be a path")
                result._error = target
            else:
                raise ArgumentError(f"Unknown field: `{key}`")
        return result

    @classmethod
    def for_keyword(cls, path: Path) -> "Fallible":
        return cls()

    def is_true(self) -> bool:
        return not self.off

    def error_type(self) -> Path | None:
        """The declared error type, if any."""
        return self._error