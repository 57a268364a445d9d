"""The ``default`` argument."""

from __future__ import annotations

from typing import Any, ClassVar

from fieldx.args.meta import ArgumentError, MetaList, Path, parse_meta, render_meta


class DefaultArg:
    """Default value: ``default(42)``, ``default(Type::func())`` or ``default(off, 42)``."""

    OPTIONAL: ClassVar[bool] = False

    def __init__(self, value: Any = None, off: bool = False, orig: str | None = None) -> None:
        self.off = off
        self.value = value
        self.orig = orig

    @classmethod
    def from_list(cls, items: list[Any]) -> "DefaultArg":
        off = False
        if len(items) == 2:
            first = items[0]
            if not (isinstance(first, Path) and first.is_ident("off")):
                raise ArgumentError("The first argument can only be 'off' keyword")
            off = True
            value = items[1]
        elif not items:
            if not cls.OPTIONAL:
                raise ArgumentError("Too few items: Expected at least 1")
            value = None
        elif len(items) > 2:
            raise ArgumentError("Too many items: Expected no more than 2")
        else:
            value = items[0]
        orig = ", ".join(render_meta(item) for item in items)
        return cls(value=value, off=off, orig=orig)

    @classmethod
    def from_word(cls) -> "DefaultArg":
        if cls.OPTIONAL:
            return cls()
        raise ArgumentError("The actual default value is required")

    @classmethod
    def from_meta(cls, item: Any) -> "DefaultArg":
        """Build from ``default`` or ``default(...)``."""
        if isinstance(item, str):
            item = parse_meta(item)
        if isinstance(item, Path):
            return cls.from_word()
        if isinstance(item, MetaList):
            return cls.from_list(item.items)
        raise ArgumentError("Unexpected meta-item format for default")

    def is_true(self) -> bool:
        return not self.off

    def is_str(self) -> bool:
        """True if the value is a string literal."""
        return type(self.value) is str

    def has_value(self) -> bool:
        """True if a value was given explicitly."""
        return self.value is not None

    def as_str(self) -> str:
        """The value as a string; raises if it is not a string literal."""
        if self.is_str():
            return self.value
        raise ArgumentError("The default value must be a string")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, off={self.off})"


class OptionalDefaultArg(DefaultArg):
    """Default argument whose value may be left out."""

    OPTIONAL = True