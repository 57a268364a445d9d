"""Syntax model of attribute arguments and the nesting argument container."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union


class ArgumentError(ValueError):
    """An attribute argument is malformed or not allowed where it is used."""


class _Char(str):
    """A single-character literal, written between single quotes."""


Literal = Union[str, bytes, int, float, bool]


@dataclass(frozen=True)
class Path:
    """A possibly qualified name such as ``off`` or ``crate::error::Error``."""

    segments: tuple[str, ...]

    def is_ident(self, name: str) -> bool:
        """True if the path is the single identifier ``name``."""
        return len(self.segments) == 1 and self.segments[0] == name

    def __str__(self) -> str:
        return "::".join(self.segments)


@dataclass(frozen=True)
class MetaList:
    """A call-like argument, ``path(tokens)``; ``tokens`` is the raw inner text."""

    path: Path
    tokens: str = ""

    @property
    def items(self) -> list[Any]:
        """The comma-separated nested arguments: metas and literals."""
        return _parse_sequence(self.tokens)


@dataclass(frozen=True)
class NameValue:
    """An assignment-like argument, ``path = literal``."""

    path: Path
    value: Any


Meta = Union[Path, MetaList, NameValue]

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<str>b?"(?:[^"\\]|\\.)*")
    |(?P<char>'(?:\\u\{[0-9a-fA-F]+\}|\\.|[^'\\])')
    |(?P<num>-?\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?(?:[a-z]\w*)?)
    |(?P<ident>(?:r\#)?[A-Za-z_]\w*)
    |(?P<sep>::)
    |(?P<punct>.)
    """,
    re.VERBOSE | re.DOTALL,
)
_NUM_RE = re.compile(r"(-?[\d_]+)(\.[\d_]+)?([eE][+-]?\d+)?([a-z]\w*)?")
_ESCAPE_RE = re.compile(r"\\(u\{([0-9a-fA-F]+)\}|x([0-9a-fA-F]{2})|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", "\\": "\\", '"': '"', "'": "'"}
_OPENERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    start: int
    end: int


def _tokenize(text: str) -> list[_Token]:
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        if kind != "ws":
            tokens.append(_Token(kind, match.group(), match.start(), match.end()))
    return tokens


def _unescape(body: str) -> str:
    def repl(match: re.Match) -> str:
        if match.group(2):
            return chr(int(match.group(2), 16))
        if match.group(3):
            return chr(int(match.group(3), 16))
        escaped = match.group(1)
        if escaped not in _SIMPLE_ESCAPES:
            raise ArgumentError(f"unknown escape sequence '\\{escaped}'")
        return _SIMPLE_ESCAPES[escaped]

    return _ESCAPE_RE.sub(repl, body)


def _literal(token: _Token) -> Literal:
    text = token.text
    if token.kind == "str":
        if text.startswith("b"):
            return _unescape(text[2:-1]).encode("latin-1")
        return _unescape(text[1:-1])
    if token.kind == "char":
        return _Char(_unescape(text[1:-1]))
    match = _NUM_RE.fullmatch(text)
    if match is None:
        raise ArgumentError(f"malformed number '{text}'")
    whole, frac, exp, suffix = match.groups()
    body = (whole + (frac or "") + (exp or "")).replace("_", "")
    if frac or exp or suffix in ("f32", "f64"):
        return float(body)
    return int(body)


def _find_close(tokens: list[_Token], open_index: int) -> int:
    stack = []
    for index in range(open_index, len(tokens)):
        text = tokens[index].text
        if tokens[index].kind != "punct":
            continue
        if text in _OPENERS:
            stack.append(_OPENERS[text])
        elif text in _OPENERS.values():
            if not stack or stack.pop() != text:
                raise ArgumentError(f"unbalanced '{text}'")
            if not stack:
                return index
    raise ArgumentError("unclosed parenthesis")


def _parse_item(text: str, tokens: list[_Token], i: int) -> tuple[Any, int]:
    token = tokens[i]
    if token.kind in ("str", "char", "num"):
        return _literal(token), i + 1
    nxt = tokens[i + 1].text if i + 1 < len(tokens) else None
    if token.kind == "ident" and token.text in ("true", "false") and nxt not in ("::", "(", "="):
        return token.text == "true", i + 1
    if token.kind not in ("ident", "sep"):
        raise ArgumentError(f"unexpected '{token.text}'")
    if token.kind == "sep":
        i += 1
    segments = []
    while True:
        if i >= len(tokens) or tokens[i].kind != "ident":
            raise ArgumentError("identifier expected")
        segments.append(tokens[i].text.removeprefix("r#"))
        i += 1
        if i < len(tokens) and tokens[i].kind == "sep":
            i += 1
            continue
        break
    path = Path(tuple(segments))
    if i < len(tokens) and tokens[i].text == "(":
        close = _find_close(tokens, i)
        inner = text[tokens[i].end : tokens[close].start].strip()
        return MetaList(path, inner), close + 1
    if i < len(tokens) and tokens[i].text == "=":
        if i + 1 >= len(tokens) or tokens[i + 1].kind not in ("str", "char", "num", "ident"):
            raise ArgumentError(f"literal expected after '{path} ='")
        value, after = _parse_item(text, tokens, i + 1)
        if not isinstance(value, (str, bytes, int, float)):
            raise ArgumentError(f"literal expected after '{path} ='")
        return NameValue(path, value), after
    return path, i


def _parse_sequence(text: str) -> list[Any]:
    tokens = _tokenize(text)
    items = []
    i = 0
    while i < len(tokens):
        item, i = _parse_item(text, tokens, i)
        items.append(item)
        if i < len(tokens):
            if tokens[i].text != ",":
                raise ArgumentError(f"expected ',' but found '{tokens[i].text}'")
            i += 1
    return items


def parse_meta(text: str) -> Meta:
    """Parse a single argument: a path, ``path(...)`` or ``path = literal``."""
    tokens = _tokenize(text)
    if not tokens:
        raise ArgumentError("empty argument")
    item, i = _parse_item(text, tokens, 0)
    if not isinstance(item, (Path, MetaList, NameValue)):
        raise ArgumentError("an argument name is expected, not a literal")
    if i != len(tokens):
        raise ArgumentError(f"unexpected '{tokens[i].text}'")
    return item


def _render_literal(value: Literal) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _Char):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return '"' + escaped.replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r") + '"'
    if isinstance(value, bytes):
        parts = []
        for byte in value:
            char = chr(byte)
            if char in '"\\':
                parts.append("\\" + char)
            elif 32 <= byte < 127:
                parts.append(char)
            else:
                parts.append(f"\\x{byte:02x}")
        return 'b"' + "".join(parts) + '"'
    return repr(value)


def render_meta(item: Any) -> str:
    """Render an argument or literal back to its source form."""
    if isinstance(item, Path):
        return str(item)
    if isinstance(item, MetaList):
        return f"{item.path}({item.tokens})"
    if isinstance(item, NameValue):
        return f"{item.path} = {_render_literal(item.value)}"
    return _render_literal(item)


class FromNestAttr:
    """Base for argument types that may be used as a keyword or with sub-arguments."""

    WITH_LITERALS: bool = True

    @classmethod
    def from_list(cls, items: list[Any]) -> "FromNestAttr":
        """Build from the non-literal sub-arguments."""
        raise ArgumentError(f"{cls.__name__} does not take sub-arguments")

    @classmethod
    def from_meta(cls, item: Meta) -> "FromNestAttr":
        """Build from a whole argument."""
        if isinstance(item, MetaList):
            return cls.from_list(item.items)
        raise ArgumentError(f"Unexpected meta-item format for {cls.__name__}")

    @classmethod
    def for_keyword(cls, path: Path) -> "FromNestAttr":
        """Build for a plain keyword with no sub-arguments."""
        raise ArgumentError("Can't be used as plain keyword, arguments required")

    @classmethod
    def with_literals(cls) -> bool:
        """Whether literal sub-arguments are accepted."""
        return cls.WITH_LITERALS

    def set_literals(self, literals: list[Literal]) -> "FromNestAttr":
        """Apply literal sub-arguments; returns the updated object."""
        if self.with_literals():
            raise ArgumentError(f"{type(self).__name__} must implement set_literals() method")
        return self.no_literals(literals)

    def no_literals(self, literals: list[Literal]) -> "FromNestAttr":
        """Reject literal sub-arguments; an empty list is accepted unchanged."""
        if not literals:
            return self
        offending = render_meta(literals[0])
        raise ArgumentError(f"Literal values are not supported here: {offending}")

    def is_true(self) -> bool:
        """Trigger value of the argument."""
        return True


class NestingAttr:
    """Wraps an argument object together with the syntax it was built from."""

    def __init__(self, inner: Any, orig: Meta | None = None) -> None:
        self.inner = inner
        self.orig = orig

    @classmethod
    def from_meta(cls, inner_type: type, item: Meta | str) -> "NestingAttr":
        """Build ``inner_type`` from a keyword, list or name-value argument."""
        if isinstance(item, str):
            item = parse_meta(item)
        if isinstance(item, MetaList):
            if inner_type.with_literals():
                non_literals = []
                literals = []
                for nested in item.items:
                    if isinstance(nested, (Path, MetaList, NameValue)):
                        non_literals.append(nested)
                    else:
                        literals.append(nested)
                inner = inner_type.from_list(non_literals)
                if literals:
                    inner = inner.set_literals(literals)
            else:
                inner = inner_type.from_meta(item)
        elif isinstance(item, Path):
            inner = inner_type.for_keyword(item)
        else:
            inner = inner_type.from_meta(item)
        return cls(inner, item)

    def is_true(self) -> bool:
        """Trigger value of the wrapped argument."""
        return self.inner.is_true()

    def to_tokens(self) -> str:
        """The original argument text, or an empty string."""
        return render_meta(self.orig) if self.orig is not None else ""

    def __getattr__(self, name: str) -> Any:
        if name in ("inner", "orig"):
            raise AttributeError(name)
        return getattr(self.inner, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


def is_true(helper: Any) -> bool:
    """Trigger value of an optional argument; absent means false."""
    return helper is not None and helper.is_true()


def is_true_opt(helper: Any) -> bool | None:
    """Trigger value of an optional argument, or None when absent."""
    return None if helper is None else helper.is_true()


def not_true(helper: Any) -> bool:
    """Negation of :func:`is_true`."""
    return not is_true(helper)