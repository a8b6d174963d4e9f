from designcode.core.sequence.allocator import SequenceAllocator, format_sequence
from designcode.core.sequence.backends.memory import InMemorySequenceStore
from designcode.core.sequence.errors import SequenceStoreClosedError, SequenceStoreError
from designcode.core.sequence.factory import create_sequence_store
from designcode.core.sequence.protocols import SequenceStore

__all__ = [
    "InMemorySequenceStore",
    "SequenceAllocator",
    "SequenceStore",
    "SequenceStoreClosedError",
    "SequenceStoreError",
    "create_sequence_store",
    "format_sequence",
]
