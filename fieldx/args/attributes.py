"""The ``attributes*`` family of arguments."""

from __future__ import annotations

from dataclasses import dataclass, field

from fieldx.args.meta import ArgumentError, MetaList, _tokenize, parse_meta

_OPEN = "([{"
_CLOSE = ")]}"


def _split_top_level(text: str) -> list[str]:
    chunks = []
    depth = 0
    start = 0
    for token in _tokenize(text):
        if token.kind != "punct":
            continue
        if token.text in _OPEN:
            depth += 1
        elif token.text in _CLOSE:
            depth -= 1
            if depth < 0:
                raise ArgumentError(f"unbalanced '{token.text}'")
        elif token.text == "," and depth == 0:
            chunks.append(text[start : token.start].strip())
            start = token.end
    if depth:
        raise ArgumentError("unclosed parenthesis")
    chunks.append(text[start:].strip())
    if not chunks[-1]:
        chunks.pop()
    if any(not chunk for chunk in chunks):
        raise ArgumentError("empty attribute in the list")
    return chunks


@dataclass
class Attributes:
    """Attribute bodies such as ``attributes(derive(Clone), inline)``.

    ``list`` holds each declaration in its final ``#[...]`` form.
    """

    list: "list[str]" = field(default_factory=lambda: [])

    @classmethod
    def from_meta(cls, item: MetaList | str) -> "Attributes":
        """Build from a list argument whose entries are attribute bodies."""
        if isinstance(item, str):
            item = parse_meta(item)
        if not isinstance(item, MetaList):
            raise ArgumentError("Can't deal with this kind of input")
        return cls([f"#[{chunk}]" for chunk in _split_top_level(item.tokens)])

    def to_tokens(self) -> str:
        """All declarations, one per line."""
        return "\n".join(self.list)