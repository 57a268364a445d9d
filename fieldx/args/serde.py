"""The ``serde`` argument."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from fieldx.args.attributes import Attributes
from fieldx.args.default import OptionalDefaultArg
from fieldx.args.meta import ArgumentError, MetaList, NameValue, NestingAttr, Path, parse_meta
from fieldx.args.modes import PubMode
from fieldx.args.util import public_mode as _public_mode
from fieldx.args.util import set_literals as _set_literals
from fieldx.args.util import validate_exclusives
from fieldx.args.value import BoolFlag, StringValue

_EXCLUSIVES = {"visibility": (("public",), ("private",))}


def _paths(item: Any) -> tuple[Path, ...]:
    if not isinstance(item, MetaList):
        raise ArgumentError("Unexpected meta-item format `forward_attrs`")
    paths = item.items
    for path in paths:
        if not isinstance(path, Path):
            raise ArgumentError("forward_attrs expects a list of paths")
    return tuple(paths)


class SerdeHelper:
    """Serialization settings: ``serde``, ``serde("Shadow", deserialize(off))`` and the like."""

    def __init__(self) -> None:
        self.off = False
        self.public: NestingAttr | None = None
        self.private: NestingAttr | None = None
        self.attributes: Attributes | None = None
        self.serialize: NestingAttr | None = None
        self.deserialize: NestingAttr | None = None
        self.forward_attrs: tuple[Path, ...] | None = None
        self._default_value: OptionalDefaultArg | None = None
        self._shadow_name: NestingAttr | None = None

    WITH_LITERALS = True

    @classmethod
    def with_literals(cls) -> bool:
        return True

    def _apply(self, key: str, item: Any) -> None:
        if key == "off":
            if not isinstance(item, Path):
                raise ArgumentError("Unexpected meta-item format `off`")
            self.off = True
        elif key == "public":
            self.public = NestingAttr.from_meta(PubMode, item)
        elif key in ("private", "serialize", "deserialize"):
            setattr(self, key, NestingAttr.from_meta(BoolFlag, item))
        elif key == "attributes":
            self.attributes = Attributes.from_meta(item)
        elif key == "forward_attrs":
            self.forward_attrs = _paths(item)
        elif key == "default":
            self._default_value = OptionalDefaultArg.from_meta(item)
        elif key == "shadow_name":
            self._shadow_name = NestingAttr.from_meta(StringValue, item)
        else:
            raise ArgumentError(f"Unknown field: `{key}`")

    @classmethod
    def from_list(cls, items: list[Any]) -> "SerdeHelper":
        helper = cls()
        seen = set()
        for item in items:
            if not isinstance(item, (Path, MetaList, NameValue)):
                raise ArgumentError("Unexpected literal")
            key = str(getattr(item, "path", item))
            if key in seen:
                raise ArgumentError(f"Duplicate field `{key}`")
            seen.add(key)
            helper._apply(key, item)
        validate_exclusives(helper, _EXCLUSIVES)
        return helper

    @classmethod
    def from_meta(cls, item: Any) -> "SerdeHelper":
        """Build from a list argument; literals are not separated here."""
        item = parse_meta(item) if isinstance(item, str) else item
        if not isinstance(item, MetaList):
            raise ArgumentError("Unexpected meta-item format for serde")
        return cls.from_list(item.items)

    @classmethod
    def for_keyword(cls, path: Path) -> "SerdeHelper":
        return cls()

    def set_literals(self, literals: list[Any]) -> "SerdeHelper":
        holder = _set_literals(
            SimpleNamespace(shadow_name=None), "serde", literals, {"shadow_name": str}, 0, 1
        )
        if holder.shadow_name is not None:
            self._shadow_name = NestingAttr(StringValue(holder.shadow_name))
        return self

    def is_true(self) -> bool:
        return not self.off

    def needs_serialize(self) -> bool | None:
        """Whether serialization is wanted; None if neither direction is specified."""
        if self.serialize is not None:
            return self.serialize.is_true()
        if self.deserialize is not None:
            return not self.deserialize.is_true()
        return None

    def needs_deserialize(self) -> bool | None:
        """Whether deserialization is wanted; None if neither direction is specified."""
        if self.deserialize is not None:
            return self.deserialize.is_true()
        if self.serialize is not None:
            return not self.serialize.is_true()
        return None

    def is_serde(self) -> bool | None:
        """False if switched off, None if undecided, else whether any direction is on."""
        if not self.is_true():
            return False
        ser = None if self.serialize is None else self.serialize.is_true()
        de = None if self.deserialize is None else self.deserialize.is_true()
        if ser is None and de is None:
            return None
        return (True if ser is None else ser) or (True if de is None else de)

    def public_mode(self) -> PubMode | None:
        """Visibility of the shadow struct, or None if not specified."""
        return _public_mode(self.public, self.private)

    def accepts_attr(self, attr_path: Path | str) -> bool:
        """True if an attribute with this path is forwarded to the shadow struct."""
        if isinstance(attr_path, str):
            attr_path = parse_meta(attr_path)
        if self.forward_attrs is None:
            return True
        return attr_path in self.forward_attrs

    def has_default(self) -> bool:
        """True if a default is given and not switched off."""
        return self._default_value is not None and self._default_value.is_true()

    def default_value(self) -> Any:
        """The default value, when one is active."""
        return self._default_value.value if self.has_default() else None

    def default_value_raw(self) -> OptionalDefaultArg | None:
        """The default argument as given, even if switched off."""
        return self._default_value

    def shadow_name(self) -> str | None:
        """Custom name of the shadow struct."""
        return None if self._shadow_name is None else self._shadow_name.value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(off={self.off}, shadow_name={self.shadow_name()!r})"