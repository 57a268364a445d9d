import asyncio
import copy

import pytest

from fieldx.async_lock import FXRwLockAsync


@pytest.mark.asyncio
async def test_readers_share_the_lock():
    lock = FXRwLockAsync("shared")
    active, peak = [0], [0]

    async def reader():
        async with lock.read() as value:
            active[0] += 1
            peak[0] = max(peak[0], active[0])
            await asyncio.sleep(0.01)
            active[0] -= 1
            return value

    results = await asyncio.gather(*(reader() for _ in range(3)))
    assert results == ["shared", "shared", "shared"]
    assert peak[0] == 3
    assert active[0] == 0


@pytest.mark.asyncio
async def test_writers_are_exclusive():
    lock = FXRwLockAsync(0)

    async def bump():
        async with lock.write() as guard:
            current = guard.value
            await asyncio.sleep(0.01)
            guard.value = current + 1

    await asyncio.gather(*(bump() for _ in range(3)))
    assert lock.into_inner() == 3


@pytest.mark.asyncio
async def test_writer_excludes_readers():
    lock = FXRwLockAsync("initial")

    async def writer_first():
        async with lock.write() as guard:
            await asyncio.sleep(0.01)
            guard.value = "written"

    async def reader_after():
        await asyncio.sleep(0)
        async with lock.read() as value:
            return value

    _, seen = await asyncio.gather(writer_first(), reader_after())
    assert seen == "written"


@pytest.mark.asyncio
async def test_read_gives_value():
    lock = FXRwLockAsync([1, 2])
    async with lock.read() as value:
        assert value == [1, 2]


@pytest.mark.asyncio
async def test_write_replaces_value():
    lock = FXRwLockAsync("old")
    async with lock.write() as guard:
        assert guard.value == "old"
        guard.value = "new"
    assert lock.into_inner() == "new"


@pytest.mark.asyncio
async def test_guard_unusable_after_release():
    lock = FXRwLockAsync(1)
    async with lock.write() as guard:
        pass
    with pytest.raises(RuntimeError):
        guard.value = 2
    assert lock.into_inner() == 1


def test_equality_compares_values():
    assert FXRwLockAsync(5) == FXRwLockAsync(5)
    assert not FXRwLockAsync(5) == FXRwLockAsync(6)


def test_copy_is_independent():
    original = FXRwLockAsync([1])
    shallow = copy.copy(original)
    deep = copy.deepcopy(original)
    deep.into_inner().append(2)
    assert original.into_inner() == [1]
    assert shallow == original
    assert shallow is not original


def test_repr_shows_value():
    assert repr(FXRwLockAsync(3)) == "FXRwLockAsync(3)"