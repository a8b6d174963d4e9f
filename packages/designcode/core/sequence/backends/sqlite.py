"""SQLite sequence store backend.

Persists counters to a local SQLite file so numbering survives restarts
and stays unique across worker processes sharing the file.

Usage::

    from designcode.core.config.models import SequenceStoreConfig
    from designcode.core.sequence.backends.sqlite import SQLiteSequenceStore

    cfg = SequenceStoreConfig(backend="sqlite", db_path=Path("sequences.db"))
    store = SQLiteSequenceStore(cfg)
    store.initialize()
    try:
        store.next("0208DH-D")
    finally:
        store.close()
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

from designcode.core.config.models import SequenceStoreConfig
from designcode.core.sequence.errors import SequenceStoreClosedError, SequenceStoreError

logger = logging.getLogger(__name__)


class SQLiteSequenceStore:
    """SQLite-backed counters.

    Each increment is a single upsert statement inside its own transaction,
    so concurrent processes serialise on the database write lock. Threads
    of one process share the connection behind a lock.

    Args:
        config: Sequence store configuration (``db_path`` required).
    """

    def __init__(self, config: SequenceStoreConfig) -> None:
        if config.db_path is None:
            raise SequenceStoreError("SQLiteSequenceStore requires a db_path")
        self._config = config
        self._table = config.table
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Open the connection and create the counters table if needed."""
        with self._lock:
            if self._conn is not None:
                return

            db_path: Path = self._config.db_path  # type: ignore[assignment]
            db_path.parent.mkdir(parents=True, exist_ok=True)

            conn = sqlite3.connect(str(db_path), check_same_thread=False, timeout=30.0)
            if self._config.enable_wal:
                conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")
            with conn:
                conn.execute(
                    f"CREATE TABLE IF NOT EXISTS {self._table} "
                    "(key TEXT PRIMARY KEY, value INTEGER NOT NULL)"
                )

            self._conn = conn
        logger.debug(f"SQLite sequence store opened: {db_path}")

    def close(self) -> None:
        """Close the SQLite connection. Safe to call multiple times."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def next(self, key: str) -> int:
        with self._lock:
            conn = self._require_conn()
            with conn:
                rows = conn.execute(
                    f"INSERT INTO {self._table} (key, value) VALUES (?, 1) "
                    "ON CONFLICT(key) DO UPDATE SET value = value + 1 "
                    "RETURNING value",
                    (key,),
                ).fetchall()
            return int(rows[0][0])

    def peek(self, key: str) -> int:
        with self._lock:
            conn = self._require_conn()
            row = conn.execute(
                f"SELECT value FROM {self._table} WHERE key = ?", (key,)
            ).fetchone()
            return int(row[0]) if row else 0

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            conn = self._require_conn()
            with conn:
                if key is None:
                    conn.execute(f"DELETE FROM {self._table}")
                else:
                    conn.execute(f"DELETE FROM {self._table} WHERE key = ?", (key,))

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise SequenceStoreClosedError("Sequence store is not initialized")
        return self._conn
