"""Shared routines for literal sub-arguments, exclusive arguments and visibility."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, Union

from fieldx.args.meta import ArgumentError, NestingAttr
from fieldx.args.modes import PubMode

ExclusiveEntry = Union[str, tuple[str, str]]


def set_literals(
    target: Any,
    name: str,
    literals: Sequence[Any],
    fields: Mapping[str, type],
    min_count: int = 0,
    max_count: int | None = None,
) -> Any:
    """Assign literal sub-arguments to ``fields`` of ``target``, in order.

    Each literal must be exactly of the type given for its field. Returns ``target``.
    """
    if len(literals) < min_count:
        raise ArgumentError(f"Too few literal arguments for {name}")
    if max_count is not None and len(literals) > max_count:
        raise ArgumentError(f"Too many literal arguments for {name}")
    for (field, expected), literal in zip(fields.items(), literals):
        if type(literal) is not expected:
            raise ArgumentError(
                f"Expected a {expected.__name__} literal argument for `{field}`"
            )
        setattr(target, field, literal)
    return target


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return bool(value.is_true())


def validate_exclusives(
    target: Any, groups: Mapping[str, Iterable[Iterable[ExclusiveEntry]]]
) -> None:
    """Raise if arguments from more than one subgroup of a group are set.

    ``groups`` maps a group name to its subgroups; each subgroup lists attribute
    names of ``target`` or ``(attribute, alias)`` pairs.
    """
    problems = []
    for group, subgroups in groups.items():
        set_params: list[str] = []
        subgroups_set = 0
        for subgroup in subgroups:
            hit = False
            for entry in subgroup:
                field, alias = (entry, entry) if isinstance(entry, str) else entry
                if _is_set(getattr(target, field, None)):
                    hit = True
                    set_params.append(alias)
            subgroups_set += hit
        if subgroups_set > 1:
            names = ", ".join(f"'{param}'" for param in set_params)
            problems.append(
                f"Conflicting arguments {names} from group '{group}' "
                "cannot be used at the same time"
            )
    if problems:
        raise ArgumentError("\n".join(problems))


def public_mode(public: Any, private: Any) -> PubMode | None:
    """Resolve visibility from optional ``public`` and ``private`` arguments."""
    if private is not None and private.is_true():
        return PubMode("private")
    if public is None:
        return None
    return public.inner if isinstance(public, NestingAttr) else public