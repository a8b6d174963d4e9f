"""Sequence store exceptions."""

from __future__ import annotations


class SequenceStoreError(Exception):
    """Base exception for all sequence store errors."""


class SequenceStoreClosedError(SequenceStoreError):
    """Raised when a store is used before ``initialize()`` or after ``close()``."""
