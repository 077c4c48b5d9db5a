"""Processing system: owns the record store, worker pool and analyzer.

This is the surrounding system the analysis core plugs into. It wires an
injected or default store and scheduler together, seeds sample data and
tears the pool down on shutdown.
"""

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import Future
from random import Random
from types import TracebackType
from typing import Any

from recordlens.adapters.scheduling import InlineScheduler, ThreadPoolScheduler
from recordlens.adapters.storage.in_memory import InMemoryRecordStore
from recordlens.core.analyzer import Analyzer
from recordlens.core.config import EngineConfig
from recordlens.core.export import export_snapshot
from recordlens.core.models import AnalysisResult, Record
from recordlens.core.ports import RecordStorePort
from recordlens.core.sample_data import generate_sample_records

logger = logging.getLogger(__name__)


class ProcessingSystem:
    """Record ingestion and asynchronous analysis.

    Example:
        ```python
        with ProcessingSystem() as system:
            system.initialize().result()
            result = system.process_data().result()
        ```
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        store: RecordStorePort | None = None,
        scheduler: ThreadPoolScheduler | InlineScheduler | None = None,
        clock: Callable[[], float] = time.time,
        rng: Random | None = None,
    ) -> None:
        """Initialize the system.

        Args:
            config: Engine configuration (defaults if None).
            store: Record store (default: a new InMemoryRecordStore).
            scheduler: Shutdown-capable worker pool (default: a
                ThreadPoolScheduler sized by ``config.max_workers``). Pass an
                InlineScheduler to run everything on the calling thread. The
                system shuts it down.
            clock: Returns the current Unix time.
            rng: Random source for sample data.
        """
        self.config = config or EngineConfig()
        self.store: RecordStorePort = store if store is not None else InMemoryRecordStore()
        self._scheduler = scheduler or ThreadPoolScheduler(
            max_workers=self.config.max_workers
        )
        self._clock = clock
        self._rng = rng
        self.analyzer = Analyzer(
            self._scheduler, thresholds=self.config.thresholds, clock=clock
        )
        logger.info("System configuration initialized: %s", self.config.as_dict())

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of the stored records."""
        return self.store.snapshot()

    @property
    def is_shutdown(self) -> bool:
        return self._scheduler.is_shutdown

    def initialize(self, count: int | None = None) -> Future[None]:
        """Seed the store with sample records on the worker pool.

        Args:
            count: Number of records (default: ``config.sample_size``).
        """
        size = self.config.sample_size if count is None else count
        return self._scheduler.submit(self._seed, size)

    def _seed(self, count: int) -> None:
        logger.info("Initializing record store with sample data...")
        records = generate_sample_records(count, rng=self._rng, now=self._clock())
        self.store.extend(records)
        logger.info("System initialized with %d records", self.store.count())

    def add_record(self, record: Record) -> None:
        self.store.append(record)

    def add_records(self, records: Iterable[Record]) -> None:
        self.store.extend(records)

    def process_data(self) -> Future[AnalysisResult]:
        """Analyze a snapshot of the store taken now."""
        return self.analyzer.process(self.store.snapshot())

    async def process_data_async(self) -> AnalysisResult:
        return await self.analyzer.process_async(self.store.snapshot())

    def export_data(self) -> dict[str, Any]:
        """Export the current snapshot with run metadata."""
        return export_snapshot(self.store.snapshot(), now=self._clock())

    def shutdown(self, timeout: float | None = None) -> bool:
        """Shut the worker pool down.

        Args:
            timeout: Seconds to wait for in-flight work
                (default: ``config.shutdown_timeout``).

        Returns:
            True if in-flight work finished before the deadline.
        """
        if self._scheduler.is_shutdown:
            return True
        deadline = self.config.shutdown_timeout if timeout is None else timeout
        finished = self._scheduler.shutdown(timeout=deadline)
        logger.info("Processing system shutdown complete.")
        return finished

    def __enter__(self) -> "ProcessingSystem":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()
