"""Scheduler adapters implementing TaskSchedulerPort."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait
from types import TracebackType
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InlineScheduler:
    """Runs each unit of work immediately on the calling thread.

    The returned future is already resolved. Intended for tests and for
    callers that want the analysis pipeline without a worker pool.
    """

    def __init__(self) -> None:
        self._shutdown = False

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def submit(self, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Future[T]:
        """Run ``fn(*args, **kwargs)`` now and return its resolved future.

        Raises:
            RuntimeError: If the scheduler has been shut down.
        """
        if self._shutdown:
            raise RuntimeError("cannot schedule new work after shutdown")
        future: Future[T] = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
        return future

    def shutdown(self, timeout: float | None = None) -> bool:
        """Stop accepting work. Nothing is ever pending, so this returns True."""
        self._shutdown = True
        return True


class ThreadPoolScheduler:
    """Bounded thread pool with a graceful, time-limited shutdown.

    Wraps ``ThreadPoolExecutor`` and tracks in-flight futures so that
    ``shutdown`` can wait for them up to a deadline before cancelling
    whatever has not started.
    """

    def __init__(
        self,
        max_workers: int = 10,
        thread_name_prefix: str = "recordlens",
    ) -> None:
        """Initialize the pool.

        Args:
            max_workers: Upper bound on worker threads.
            thread_name_prefix: Prefix for worker thread names.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._lock = threading.Lock()
        self._pending: set[Future[Any]] = set()
        self._shutdown = False

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def submit(self, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Future[T]:
        """Schedule ``fn(*args, **kwargs)`` on the pool.

        Raises:
            RuntimeError: If the scheduler has been shut down.
        """
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new work after shutdown")
            future = self._executor.submit(fn, *args, **kwargs)
            self._pending.add(future)
        future.add_done_callback(self._discard)
        return future

    def _discard(self, future: Future[Any]) -> None:
        with self._lock:
            self._pending.discard(future)

    def shutdown(self, timeout: float | None = 60.0) -> bool:
        """Stop accepting work and wait for in-flight work to finish.

        Args:
            timeout: Seconds to wait. None waits indefinitely.

        Returns:
            True if all work finished in time, False if pending work was
            cancelled after the deadline.
        """
        with self._lock:
            self._shutdown = True
            pending = set(self._pending)

        _, not_done = wait(pending, timeout=timeout)
        if not_done:
            logger.warning(
                "Scheduler did not terminate in time, cancelling %d pending tasks",
                len(not_done),
            )
            self._executor.shutdown(wait=False, cancel_futures=True)
            return False

        self._executor.shutdown(wait=True)
        return True

    def __enter__(self) -> "ThreadPoolScheduler":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()
