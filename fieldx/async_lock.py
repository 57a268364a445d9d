"""Reader-writer locks for fields shared between asyncio tasks."""

from __future__ import annotations

import asyncio
import copy
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, TypeVar

T = TypeVar("T")


class AsyncRwLock:
    """A writer-preferring reader-writer lock for asyncio tasks.

    Any number of readers may hold the lock at once; a writer holds it alone.
    The lock is not re-entrant.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock shared for the duration of the block."""
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._waiting_writers)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._waiting_writers -= 1
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class _AsyncWriteGuard(Generic[T]):
    """Gives access to a locked value while the write lock is held."""

    def __init__(self, owner: "FXRwLockAsync[T]") -> None:
        self._owner: FXRwLockAsync[T] | None = owner

    def _checked(self) -> "FXRwLockAsync[T]":
        if self._owner is None:
            raise RuntimeError("write guard used after the lock was released")
        return self._owner

    @property
    def value(self) -> T:
        return self._checked()._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._checked()._value = new_value

    def _release(self) -> None:
        self._owner = None


class FXRwLockAsync(Generic[T]):
    """A value protected by an asyncio reader-writer lock.

    Copying produces an independent lock around a copy of the value.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = AsyncRwLock()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[T]:
        """Hold a shared lock and give the protected value."""
        async with self._lock.read():
            yield self._value

    @asynccontextmanager
    async def write(self) -> AsyncIterator[_AsyncWriteGuard[T]]:
        """Hold an exclusive lock and give a guard whose ``value`` can be replaced."""
        async with self._lock.write():
            guard = _AsyncWriteGuard(self)
            try:
                yield guard
            finally:
                guard._release()

    def into_inner(self) -> T:
        """Return the protected value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FXRwLockAsync):
            return NotImplemented
        return other is self or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "FXRwLockAsync[T]":
        return type(self)(copy.copy(self._value))

    def __deepcopy__(self, memo: dict[int, Any]) -> "FXRwLockAsync[T]":
        return type(self)(copy.deepcopy(self._value, memo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"