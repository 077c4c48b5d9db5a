"""Ring buffer record store.

Provides bounded in-memory storage that automatically evicts the oldest
records when the buffer is full. Useful for long-running services that
need predictable memory usage.
"""

import threading
from collections import deque
from collections.abc import AsyncIterable, Iterable

from recordlens.core.models import Record


class RingBufferRecordStore:
    """Ring buffer implementation of RecordStorePort.

    Stores records in a fixed-size circular buffer. When the buffer
    is full, the oldest record is automatically evicted to make room for
    new records.

    Args:
        max_size: Maximum number of records to store.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._lock = threading.Lock()
        self._buffer: deque[Record] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._buffer.maxlen or 0

    def append(self, record: Record) -> None:
        with self._lock:
            self._buffer.append(record)

    def extend(self, records: Iterable[Record]) -> None:
        batch = list(records)
        with self._lock:
            self._buffer.extend(batch)

    def snapshot(self) -> tuple[Record, ...]:
        """Return the retained records, oldest first."""
        with self._lock:
            return tuple(self._buffer)

    def count(self) -> int:
        with self._lock:
            return len(self._buffer)

    def __len__(self) -> int:
        return self.count()

    async def write(self, record: Record) -> None:
        self.append(record)

    async def read(self, since: float = 0) -> AsyncIterable[Record]:
        """Read records since the given timestamp.

        Returns records with timestamp > since, ordered by timestamp ascending.
        """
        filtered = [r for r in self.snapshot() if r.timestamp > since]
        for record in sorted(filtered, key=lambda r: r.timestamp):
            yield record
