"""Port interfaces for storage and scheduling adapters.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import AsyncIterable, Callable, Iterable
from concurrent.futures import Future
from typing import Any, Protocol, TypeVar, runtime_checkable

from recordlens.core.models import Record

T = TypeVar("T")


@runtime_checkable
class RecordStorePort(Protocol):
    """Port for record storage operations.

    Adapters are append-only and safe to call from several threads.
    Examples: InMemoryRecordStore, RingBufferRecordStore.
    """

    def append(self, record: Record) -> None:
        """Append a single record."""
        ...

    def extend(self, records: Iterable[Record]) -> None:
        """Append several records in order."""
        ...

    def snapshot(self) -> tuple[Record, ...]:
        """Return a point-in-time copy of the stored records.

        Returns:
            Records in append order. Includes every record appended before
            the call began.
        """
        ...

    def count(self) -> int:
        """Return the number of stored records."""
        ...

    async def write(self, record: Record) -> None:
        """Append a record from async code."""
        ...

    def read(self, since: float = 0) -> AsyncIterable[Record]:
        """Read records since the given timestamp.

        Args:
            since: Unix timestamp. Returns records with timestamp > since.
                   Default 0 returns all records.

        Returns:
            Async iterable of Record objects, ordered by timestamp ascending.
        """
        ...


@runtime_checkable
class TaskSchedulerPort(Protocol):
    """Port for submitting units of work to a worker pool.

    ``concurrent.futures.ThreadPoolExecutor`` satisfies this protocol as is.
    """

    def submit(self, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Future[T]:
        """Schedule ``fn(*args, **kwargs)`` and return its future."""
        ...
