"""Sequence store factory — selects and constructs the correct backend.

Usage::

    from designcode.core.config.models import SequenceStoreConfig
    from designcode.core.sequence.factory import create_sequence_store

    store = create_sequence_store(SequenceStoreConfig(backend="memory"))
    store.initialize()
"""

from __future__ import annotations

import logging

from designcode.core.config.models import SequenceStoreConfig
from designcode.core.sequence.errors import SequenceStoreError
from designcode.core.sequence.protocols import SequenceStore

logger = logging.getLogger(__name__)


def create_sequence_store(config: SequenceStoreConfig) -> SequenceStore:
    """Construct a sequence store backend from *config*.

    Args:
        config: Backend selection and connection parameters.

    Returns:
        An uninitialised ``SequenceStore`` implementation.

    Raises:
        SequenceStoreError: If the backend is unknown, or if required
            parameters (e.g. ``db_path`` for SQLite) are missing.
    """
    if config.backend == "memory":
        from designcode.core.sequence.backends.memory import InMemorySequenceStore

        logger.debug("Using in-memory sequence store")
        return InMemorySequenceStore()

    if config.backend == "sqlite":
        if config.db_path is None:
            raise SequenceStoreError(
                "backend='sqlite' requires a db_path but none was provided. "
                "Set SequenceStoreConfig.db_path to a valid file path."
            )
        from designcode.core.sequence.backends.sqlite import SQLiteSequenceStore

        logger.debug(f"Using SQLite sequence store at {config.db_path}")
        return SQLiteSequenceStore(config)

    raise SequenceStoreError(
        f"Unknown sequence store backend: {config.backend!r}. Supported backends: 'memory', 'sqlite'."
    )
