"""In-memory record store."""

import threading
from collections.abc import AsyncIterable, Iterable

from recordlens.core.models import Record


class InMemoryRecordStore:
    """In-memory implementation of RecordStorePort.

    Stores records in a list guarded by a lock. Suitable for testing and
    low-volume applications where persistence is not required.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._lock = threading.Lock()
        self._records: list[Record] = list(records)

    def append(self, record: Record) -> None:
        """Append a single record."""
        with self._lock:
            self._records.append(record)

    def extend(self, records: Iterable[Record]) -> None:
        """Append several records in order."""
        batch = list(records)
        with self._lock:
            self._records.extend(batch)

    def snapshot(self) -> tuple[Record, ...]:
        """Return a point-in-time copy of the stored records."""
        with self._lock:
            return tuple(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()

    async def write(self, record: Record) -> None:
        """Append a record from async code."""
        self.append(record)

    async def read(self, since: float = 0) -> AsyncIterable[Record]:
        """Read records since the given timestamp.

        Returns records with timestamp > since, ordered by timestamp ascending.
        """
        filtered = [r for r in self.snapshot() if r.timestamp > since]
        for record in sorted(filtered, key=lambda r: r.timestamp):
            yield record
