# fieldx

Two things live in this package:

- `fieldx.async_lock`: a reader-writer lock for asyncio tasks and a container
  that keeps a value behind such a lock;
- `fieldx.args`: a small toolkit that parses declarative attribute arguments
  such as `get("getter", clone)`, `builder(into, required)` or
  `serde("Shadow", deserialize(off))` into typed, validated objects.

## Installation

    pip install fieldx

For running the test suite:

    pip install "fieldx[test]"
    pytest

## Lock-protected values in asyncio code

`AsyncRwLock` is a writer-preferring, non-re-entrant reader-writer lock. Any
number of tasks may hold `read()` at once; `write()` is exclusive.

`FXRwLockAsync` wraps a value with such a lock. `read()` yields the value;
`write()` yields a guard whose `value` attribute can be read or replaced while
the lock is held. `into_inner()` returns the value. Two containers compare
equal when their values do, and `copy.copy` / `copy.deepcopy` produce an
independent lock around a copy of the value.

```python
import asyncio
from fieldx.async_lock import FXRwLockAsync

async def main():
    counter = FXRwLockAsync(1)
    async with counter.write() as guard:
        guard.value = guard.value + 1
    async with counter.read() as value:
        assert value == 2

asyncio.run(main())
```

## Argument parsing

`fieldx.args.meta.parse_meta` turns argument text into one of three syntax
objects: `Path` (`off`, `crate::error::Error`), `MetaList` (`name(...)`, with
its nested `items`) or `NameValue` (`name = literal`). Literals come out as
Python `str`, `bytes`, `int`, `float` and `bool`. `render_meta` writes them
back. Malformed or disallowed input raises `ArgumentError`, a `ValueError`.

`NestingAttr.from_meta(kind, item)` builds an argument of type `kind` from a
keyword, a list or a name-value item, separating literal sub-arguments from
the rest, and keeps the original syntax. Attributes not found on the wrapper
are looked up on the wrapped object.

```python
from fieldx.args.meta import NestingAttr, parse_meta
from fieldx.args.helpers import AccessorHelper, AccessorMode

get = NestingAttr.from_meta(AccessorHelper, parse_meta('get("getter", clone)'))
assert get.is_true()
assert get.name == "getter"
assert get.mode() is AccessorMode.CLONE
```

Argument types available:

- `fieldx.args.value`: `ValueArg` and its kinds `BoolFlag`, `StringValue`,
  `IntValue`, `FloatValue`, `BoolValue`, `BytesValue`, `CharValue`: a single
  literal or a bare flag, each switchable with `off`.
- `fieldx.args.helpers`: `BaseHelper`, `AccessorHelper` (with `copy`, `clone`
  or `as_ref`, mutually exclusive), `SetterHelper` (with `into`) and
  `Fallible` (with `error(path)`). Helpers accept a name literal, `off`,
  `public(...)` or `private` (mutually exclusive), `attributes(...)` and
  `attributes_fn(...)`.
- `fieldx.args.builder`: `BuilderHelper` for field level and
  `StructBuilderHelper` for struct level, with `into`, `required`, `opt_in`,
  `post_build(ident)`, `error(Type)` or `error(Type, Type::Variant)` and
  `attributes_impl(...)`. `error`, `post_build` and `opt_in` are rejected at
  field level.
- `fieldx.args.serde`: `SerdeHelper` with `serialize`, `deserialize`,
  `forward_attrs(...)`, `default(...)`, `shadow_name` or a name literal, and
  visibility.
- `fieldx.args.default`: `DefaultArg` (`default(42)`, `default(off, 42)`) and
  `OptionalDefaultArg`, which also allows a bare `default`.
- `fieldx.args.attributes`: `Attributes`, turning `attributes(derive(Clone),
  inline)` into `#[derive(Clone)]` and `#[inline]`.
- `fieldx.args.modes`: `PubMode` (private, crate, super, `in_mod(path)` or all)
  and the `SyncMode` enum (`sync`, `async`, `plain`).
- `fieldx.args.syn_value`: `SynValueArg`, `SynTupleArg` and `Punctuated` for
  arguments whose contents are syntax elements with count limits.
- `fieldx.args.util`: `set_literals`, `validate_exclusives` and `public_mode`.

```python
from fieldx.args.meta import NestingAttr
from fieldx.args.serde import SerdeHelper

serde = NestingAttr.from_meta(SerdeHelper, 'serde("Shadow", deserialize(off))')
assert serde.shadow_name() == "Shadow"
assert serde.needs_serialize() is True
assert serde.needs_deserialize() is False
```

## What this package does not do

It offers no lazily initialised field containers, no thread-based lock
container and no error types for object builders. Parsed arguments are
descriptions only: nothing here generates classes, accessors or builders from
them.