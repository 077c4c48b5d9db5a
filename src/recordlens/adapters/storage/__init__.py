"""Storage adapters implementing RecordStorePort."""

from recordlens.adapters.storage.in_memory import InMemoryRecordStore
from recordlens.adapters.storage.ring_buffer import RingBufferRecordStore

__all__ = [
    "InMemoryRecordStore",
    "RingBufferRecordStore",
]
