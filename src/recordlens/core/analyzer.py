"""Asynchronous analysis pipeline: summary → insights → recommendations."""

import asyncio
import logging
import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future

from recordlens.core.config import AnalysisThresholds
from recordlens.core.errors import ProcessingError
from recordlens.core.insights import generate_insights
from recordlens.core.logs import timed_log
from recordlens.core.models import AnalysisResult, Record
from recordlens.core.ports import TaskSchedulerPort
from recordlens.core.recommendations import generate_recommendations
from recordlens.core.summary import compute_summary

logger = logging.getLogger(__name__)


def analyze(
    records: Sequence[Record],
    thresholds: AnalysisThresholds | None = None,
    now: float | None = None,
    clock: Callable[[], float] = time.time,
) -> AnalysisResult:
    """Run all three stages synchronously over a snapshot.

    Args:
        records: Snapshot to analyze. Not modified.
        thresholds: Stage thresholds (defaults if None).
        now: Unix time for the recency check. When None, ``clock`` is read
            once inside the guarded run.
        clock: Source of the current Unix time when ``now`` is None.

    Returns:
        A complete AnalysisResult.

    Raises:
        ProcessingError: If any stage raises. Wraps the underlying exception.
    """
    if thresholds is None:
        thresholds = AnalysisThresholds()

    logger.info("Starting data processing of %d records", len(records))
    try:
        with timed_log("analysis", log=logger, record_count=len(records)) as timing:
            if now is None:
                now = clock()
            summary = compute_summary(records)
            insights = generate_insights(records, thresholds)
            recommendations = generate_recommendations(records, now, thresholds)
    except Exception as exc:
        logger.exception("Data processing failed")
        raise ProcessingError("Data processing failed", exc) from exc

    result = AnalysisResult(
        summary=summary,
        insights=tuple(insights),
        recommendations=tuple(recommendations),
        processing_time_ms=timing.elapsed_ms or 0.0,
    )
    logger.info("Data processing completed in %.3fms", result.processing_time_ms)
    return result


class Analyzer:
    """Schedules analysis runs onto an injected worker pool.

    The analyzer holds no mutable state between calls. Each ``process``
    call copies its input into a tuple and submits one unit of work.

    Example:
        ```python
        from concurrent.futures import ThreadPoolExecutor

        with ThreadPoolExecutor(max_workers=4) as pool:
            analyzer = Analyzer(pool)
            result = analyzer.process(store.snapshot()).result()
        ```
    """

    def __init__(
        self,
        scheduler: TaskSchedulerPort,
        thresholds: AnalysisThresholds | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the analyzer.

        Args:
            scheduler: Worker pool to submit runs to. Owned by the caller.
            thresholds: Stage thresholds (defaults if None).
            clock: Returns the current Unix time; read once per run.
        """
        self._scheduler = scheduler
        self._thresholds = thresholds or AnalysisThresholds()
        self._clock = clock

    @property
    def thresholds(self) -> AnalysisThresholds:
        return self._thresholds

    def process(self, records: Iterable[Record]) -> Future[AnalysisResult]:
        """Submit an analysis run and return immediately.

        Args:
            records: Snapshot to analyze.

        Returns:
            Future resolving to an AnalysisResult, or failing with
            ProcessingError.
        """
        snapshot = tuple(records)
        return self._scheduler.submit(self._run, snapshot)

    async def process_async(self, records: Iterable[Record]) -> AnalysisResult:
        """Await an analysis run from asyncio code."""
        return await asyncio.wrap_future(self.process(records))

    def _run(self, snapshot: tuple[Record, ...]) -> AnalysisResult:
        return analyze(snapshot, self._thresholds, clock=self._clock)
