"""Arguments that take a single literal or serve as an explicit flag."""

from __future__ import annotations

from typing import Any, ClassVar

from fieldx.args.meta import ArgumentError, FromNestAttr, Path, _Char


class ValueArg(FromNestAttr):
    """``arg``, ``arg(value)``, ``arg(off)`` or ``arg(off, value)``."""

    BOOL_ONLY: ClassVar[bool] = False
    TYPE_NAME: ClassVar[str] = "value"

    def __init__(self, value: Any = None, off: bool = False) -> None:
        self.off = off
        self._value = value

    @classmethod
    def from_list(cls, items: list[Any]) -> "ValueArg":
        off = False
        for item in items:
            if isinstance(item, Path) and item.is_ident("off"):
                if off:
                    raise ArgumentError("Duplicate field `off`")
                off = True
            else:
                name = getattr(item, "path", item)
                raise ArgumentError(f"Unknown field: `{name}`")
        return cls(off=off)

    @classmethod
    def for_keyword(cls, path: Path) -> "ValueArg":
        if cls.BOOL_ONLY:
            return cls()
        raise ArgumentError(f"A literal {cls.TYPE_NAME} argument is required")

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return False

    def set_literals(self, literals: list[Any]) -> "ValueArg":
        if literals and self.BOOL_ONLY:
            raise ArgumentError("No literal arguments are allowed here")
        if len(literals) > 1:
            raise ArgumentError("Only one literal argument is allowed here")
        if self.BOOL_ONLY:
            return self
        literal = literals[0]
        if not self._accepts(literal):
            raise ArgumentError(f"Unexpected literal type for a {self.TYPE_NAME} argument")
        self._value = literal
        return self

    def value(self) -> Any:
        """The literal, or None when absent or switched off."""
        return self._value if self.is_true() else None

    def is_true(self) -> bool:
        return not self.off

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, off={self.off})"


class BoolFlag(ValueArg):
    """Trigger only: ``arg`` or ``arg(off)``."""

    BOOL_ONLY = True
    TYPE_NAME = "flag"


class StringValue(ValueArg):
    TYPE_NAME = "string"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, str) and not isinstance(literal, _Char)


class IntValue(ValueArg):
    TYPE_NAME = "integer"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, int) and not isinstance(literal, bool)


class FloatValue(ValueArg):
    TYPE_NAME = "float"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, float)


class BoolValue(ValueArg):
    TYPE_NAME = "bool"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, bool)


class BytesValue(ValueArg):
    TYPE_NAME = "byte string"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, bytes)


class CharValue(ValueArg):
    TYPE_NAME = "char"

    @classmethod
    def _accepts(cls, literal: Any) -> bool:
        return isinstance(literal, _Char)