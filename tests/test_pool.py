import pytest

from hexcore import BufferPool


def test_acquire_from_empty_pool_creates_buffer():
    pool = BufferPool(2)
    buffer = pool.acquire()
    assert buffer == []
    assert pool.stats.created == 1


def test_released_buffer_is_cleared_and_reused():
    pool = BufferPool(2)
    buffer = pool.acquire()
    buffer.extend([1, 2, 3])
    pool.release(buffer)
    assert buffer == []
    again = pool.acquire()
    assert again is buffer
    assert pool.stats.reused == 1


def test_pool_never_holds_more_than_capacity():
    pool = BufferPool(1)
    first, second = pool.acquire(), pool.acquire()
    pool.release(first)
    pool.release(second)
    assert len(pool) == 1
    assert pool.stats.discarded == 1


def test_double_release_is_ignored():
    pool = BufferPool(4)
    buffer = pool.acquire()
    pool.release(buffer)
    pool.release(buffer)
    assert len(pool) == 1


def test_zero_capacity_discards_everything():
    pool = BufferPool(0)
    pool.release(pool.acquire())
    assert len(pool) == 0
    assert pool.stats.discarded == 1


def test_borrowed_returns_buffer_on_exit():
    pool = BufferPool(2)
    with pool.borrowed() as buffer:
        buffer.append("x")
    assert len(pool) == 1
    assert pool.acquire() is buffer
    assert buffer == []


def test_borrowed_returns_buffer_on_error():
    pool = BufferPool(2)
    with pytest.raises(RuntimeError):
        with pool.borrowed() as buffer:
            buffer.append(1)
            raise RuntimeError("boom")
    assert len(pool) == 1


def test_clear_empties_pool_and_stats():
    pool = BufferPool(3)
    pool.release(pool.acquire())
    pool.clear()
    assert len(pool) == 0
    assert pool.stats.created == 0


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        BufferPool(-1)
