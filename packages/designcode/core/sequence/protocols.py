"""Sequence store protocol definition.

Backends must satisfy ``SequenceStore`` to be usable by the allocator. The
protocol is ``@runtime_checkable`` so callers can guard with
``isinstance(store, SequenceStore)``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SequenceStore(Protocol):
    """Per-key integer counters.

    ``next`` must be atomic: two concurrent calls for the same key never
    return the same value.

    Lifecycle::

        store.initialize()
        try:
            n = store.next("0208DH-D")
        finally:
            store.close()
    """

    def initialize(self) -> None:
        """Open backend resources. Safe to call multiple times."""
        ...

    def close(self) -> None:
        """Release backend resources. Safe to call multiple times (idempotent)."""
        ...

    def next(self, key: str) -> int:
        """Increment the counter for ``key`` and return the new value.

        The first call for a key returns 1.
        """
        ...

    def peek(self, key: str) -> int:
        """Return the last value issued for ``key`` (0 if never used)."""
        ...

    def reset(self, key: str | None = None) -> None:
        """Forget the counter for ``key``, or every counter when ``key`` is None."""
        ...
