"""Tests for the in-memory sequence store."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from designcode.core.sequence.backends.memory import InMemorySequenceStore
from designcode.core.sequence.protocols import SequenceStore


def test_satisfies_protocol() -> None:
    assert isinstance(InMemorySequenceStore(), SequenceStore)


def test_first_call_returns_one_then_increments() -> None:
    store = InMemorySequenceStore()
    assert store.next("0208DH-D") == 1
    assert store.next("0208DH-D") == 2
    assert store.next("0208DH-N") == 1


def test_peek_does_not_increment() -> None:
    store = InMemorySequenceStore()
    assert store.peek("k") == 0
    store.next("k")
    assert store.peek("k") == 1
    assert store.peek("k") == 1


def test_reset_single_key_and_all() -> None:
    store = InMemorySequenceStore({"a": 5, "b": 2})

    store.reset("a")
    assert store.snapshot() == {"b": 2}
    assert store.next("a") == 1

    store.reset()
    assert store.snapshot() == {}


def test_lifecycle_is_idempotent() -> None:
    store = InMemorySequenceStore()
    store.initialize()
    store.initialize()
    store.close()
    store.close()


def test_concurrent_calls_never_share_a_value() -> None:
    store = InMemorySequenceStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        values = list(pool.map(lambda _: store.next("hot-key"), range(500)))

    assert sorted(values) == list(range(1, 501))
