"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator

import pytest

from recordlens.adapters.scheduling import InlineScheduler, ThreadPoolScheduler
from recordlens.adapters.storage.in_memory import InMemoryRecordStore
from recordlens.core.analyzer import Analyzer
from recordlens.core.models import Record

try:
    import httpx
except ImportError:
    httpx = None

NOW = 1_702_300_000.0


@pytest.fixture
def now() -> float:
    """Fixed Unix time used as the analysis clock."""
    return NOW


@pytest.fixture
def make_record(now: float) -> Callable[..., Record]:
    """Factory fixture for records stamped at the fixed clock.

    Usage:
        record = make_record(10.0, category="A", age_hours=30)
    """
    counter = iter(range(1, 1_000_000))

    def _make(value: float, age_hours: float = 0.0, **metadata: object) -> Record:
        return Record(
            id=f"rec-{next(counter)}",
            timestamp=now - age_hours * 3600,
            value=value,
            metadata=metadata,  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture
def inline_analyzer(now: float) -> Analyzer:
    """Analyzer that runs synchronously against the fixed clock."""
    return Analyzer(InlineScheduler(), clock=lambda: now)


@pytest.fixture
def pool() -> Iterator[ThreadPoolScheduler]:
    """Small thread pool, shut down after the test."""
    scheduler = ThreadPoolScheduler(max_workers=4)
    yield scheduler
    scheduler.shutdown(timeout=5.0)


@pytest.fixture
def pooled_analyzer(pool: ThreadPoolScheduler, now: float) -> Analyzer:
    """Analyzer scheduling onto a real thread pool."""
    return Analyzer(pool, clock=lambda: now)


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    """Fixture providing an empty record store."""
    return InMemoryRecordStore()


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            async with asgi_test_client(app) as client:
                response = await client.get("/analysis")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
