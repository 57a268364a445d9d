"""Arguments whose sub-arguments are syntax elements rather than named options."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator

from fieldx.args.meta import ArgumentError, FromNestAttr, MetaList, NameValue, Path, parse_meta

_MIN_TUPLE = 2
_MAX_TUPLE = 10


def _as_meta(item: Any) -> Any:
    return parse_meta(item) if isinstance(item, str) else item


def _too_few(expected: int) -> ArgumentError:
    return ArgumentError(f"Too few items: Expected at least {expected}")


def _too_many(expected: int) -> ArgumentError:
    return ArgumentError(f"Too many items: Expected no more than {expected}")


class SynValueArg(FromNestAttr):
    """Argument taking exactly one syntax element, such as ``foo(crate::Bar)``.

    With ``AS_KEYWORD`` set the argument may also be a plain keyword, and then
    carries no value.
    """

    WITH_LITERALS: ClassVar[bool] = False
    AS_KEYWORD: ClassVar[bool] = False

    def __init__(self, value: Any = None) -> None:
        self._value = value

    @classmethod
    def _parse(cls, item: MetaList) -> Any:
        elements = item.items
        if len(elements) != 1:
            raise ArgumentError("exactly one syntax element is expected")
        return elements[0]

    @classmethod
    def from_meta(cls, item: Any) -> "SynValueArg":
        item = _as_meta(item)
        if not isinstance(item, MetaList):
            raise ArgumentError("argument is expected")
        return cls(cls._parse(item))

    @classmethod
    def for_keyword(cls, path: Path) -> "SynValueArg":
        if cls.AS_KEYWORD:
            return cls()
        return super().for_keyword(path)

    def value(self) -> Any:
        """The syntax element, or None for a bare keyword."""
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class SynTupleArg(FromNestAttr):
    """Argument taking a fixed number (2 to 10) of syntax elements."""

    WITH_LITERALS: ClassVar[bool] = False
    ARITY: ClassVar[int] = 2

    def __init__(self, value: tuple) -> None:
        self._value = tuple(value)

    @classmethod
    def from_list(cls, items: list[Any], arity: int | None = None) -> "SynTupleArg":
        expected = cls.ARITY if arity is None else arity
        if not _MIN_TUPLE <= expected <= _MAX_TUPLE:
            raise ValueError(f"tuple arity must be between {_MIN_TUPLE} and {_MAX_TUPLE}")
        if len(items) > expected:
            raise _too_many(expected)
        if len(items) < expected:
            raise _too_few(expected)
        return cls(tuple(items))

    def value(self) -> tuple:
        """The tuple of syntax elements."""
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Punctuated:
    """A comma-separated list of syntax elements with optional count limits."""

    def __init__(self, items: list[Any]) -> None:
        self._items = list(items)

    @classmethod
    def parse(
        cls, items: list[Any], min_count: int | None = None, max_count: int | None = None
    ) -> "Punctuated":
        """Build from already split elements, checking the count limits."""
        items = list(items)
        if min_count is not None and len(items) < min_count:
            raise _too_few(min_count)
        if max_count is not None and len(items) > max_count:
            raise _too_many(max_count)
        return cls(items)

    @classmethod
    def from_meta(
        cls, item: Any, min_count: int | None = None, max_count: int | None = None
    ) -> "Punctuated":
        """Build from ``name(a, b, ...)`` or from a single bare path."""
        item = _as_meta(item)
        if isinstance(item, MetaList):
            return cls.parse(item.items, min_count, max_count)
        if isinstance(item, NameValue):
            raise ArgumentError(f"unexpected '=' after '{item.path}'")
        return cls.parse([item], min_count, max_count)

    def items(self) -> list[Any]:
        """The syntax elements."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Punctuated):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"