"""Sequence allocation for design codes.

Turns store counters into zero-padded sequence strings scoped by a
composite key built from template field values (``orderCode-designType``
for the built-in templates).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from designcode.core.sequence.protocols import SequenceStore
from designcode.core.templates.models import DesignCodeTemplate

logger = logging.getLogger(__name__)


def format_sequence(value: int, width: int = 3) -> str:
    """Zero-pad ``value`` to at least ``width`` digits.

    Wider values keep all their digits:

    >>> format_sequence(7)
    '007'
    >>> format_sequence(1234)
    '1234'
    """
    return str(value).zfill(width)


class SequenceAllocator:
    """Allocates per-key sequence strings from a ``SequenceStore``."""

    def __init__(self, store: SequenceStore, *, width: int = 3) -> None:
        if width < 1:
            raise ValueError(f"width must be >= 1, got {width}")
        self._store = store
        self._width = width

    @property
    def store(self) -> SequenceStore:
        return self._store

    @property
    def width(self) -> int:
        return self._width

    @staticmethod
    def composite_key(template: DesignCodeTemplate, values: Mapping[str, str]) -> str:
        """Join the template's sequence-scope values with ``-`` (missing values are empty)."""
        return "-".join(values.get(k) or "" for k in template.sequence_scope)

    def next(self, composite_key: str) -> str:
        """Consume and return the next sequence string for ``composite_key``."""
        value = self._store.next(composite_key)
        logger.debug(f"Allocated sequence {value} for {composite_key!r}")
        return format_sequence(value, self._width)

    def peek_next(self, composite_key: str) -> str:
        """Sequence string the next ``next()`` call would return, without consuming it."""
        return format_sequence(self._store.peek(composite_key) + 1, self._width)
