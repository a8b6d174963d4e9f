"""In-memory sequence store backend.

Counters live for the lifetime of the store object and are not shared
across processes. This is the default backend and the one used in tests.
"""

from __future__ import annotations

import threading


class InMemorySequenceStore:
    """Dict-backed counters guarded by a lock.

    Satisfies ``SequenceStore`` at runtime (verified by ``isinstance``).
    Lifecycle methods are no-ops.
    """

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._counters: dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """No-op initialisation. Safe to call multiple times."""

    def close(self) -> None:
        """No-op close. Safe to call multiple times."""

    def next(self, key: str) -> int:
        with self._lock:
            value = self._counters.get(key, 0) + 1
            self._counters[key] = value
            return value

    def peek(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._counters.clear()
            else:
                self._counters.pop(key, None)

    def snapshot(self) -> dict[str, int]:
        """Copy of all counters."""
        with self._lock:
            return dict(self._counters)
