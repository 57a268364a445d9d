"""Visibility and concurrency mode arguments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from fieldx.args.meta import ArgumentError, FromNestAttr, MetaList, Path, parse_meta


@dataclass(frozen=True)
class PubMode(FromNestAttr):
    """Visibility of a generated item: private, crate, super, in_mod(path) or all."""

    kind: str = "all"
    path: Path | None = None

    @classmethod
    def from_list(cls, items: list[Any]) -> "PubMode":
        if len(items) != 1:
            raise ArgumentError("expected exactly one of 'crate', 'super' or 'in_mod(...)'")
        return cls.from_meta(items[0])

    @classmethod
    def from_meta(cls, item: Any) -> "PubMode":
        if isinstance(item, Path):
            if item.is_ident("crate"):
                return cls("crate")
            if item.is_ident("super"):
                return cls("super")
        elif isinstance(item, MetaList):
            if item.path.is_ident("in_mod"):
                target = parse_meta(item.tokens)
                if not isinstance(target, Path):
                    raise ArgumentError("in_mod expects a module path")
                return cls("in_mod", target)
            return cls.from_list(item.items)
        raise ArgumentError(f"unknown visibility '{getattr(item, 'path', item)}'")

    @classmethod
    def for_keyword(cls, path: Path) -> "PubMode":
        return cls("all")

    def set_literals(self, literals: list[Any]) -> "PubMode":
        raise ArgumentError("No literals allowed here")

    def to_tokens(self) -> str:
        """The visibility qualifier as source text."""
        if self.kind == "private":
            return ""
        if self.kind == "in_mod":
            return f"pub(in {self.path})"
        if self.kind == "all":
            return "pub"
        return f"pub({self.kind})"

    def is_true(self) -> bool:
        return True


class SyncMode(enum.Enum):
    """Concurrency mode of a struct or field."""

    SYNC = "sync"
    ASYNC = "async"
    PLAIN = "plain"

    @classmethod
    def parse(cls, text: str) -> "SyncMode":
        """Parse ``sync``, ``async`` or ``plain``."""
        word = text.strip().removeprefix("r#")
        try:
            return cls(word)
        except ValueError:
            raise ArgumentError("expected 'sync', 'async' or 'plain'") from None

    def is_sync(self) -> bool:
        return self is SyncMode.SYNC

    def is_async(self) -> bool:
        return self is SyncMode.ASYNC

    def is_plain(self) -> bool:
        return self is SyncMode.PLAIN

    def is_true(self) -> bool:
        return True