"""Random sample records for demos and smoke tests."""

import logging
import random
import time

from recordlens.core.models import Record

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = ("A", "B", "C")
MAX_SAMPLE_VALUE = 1000.0


def generate_sample_records(
    count: int,
    rng: random.Random | None = None,
    now: float | None = None,
) -> list[Record]:
    """Generate ``count`` random records.

    Ids run ``record-1`` .. ``record-<count>``. Timestamps fall on whole
    hours within the last 24 hours, values in [0, 1000), and metadata
    carries ``category`` (A/B/C), ``priority`` (1-5) and ``source``.

    Args:
        count: Number of records to generate.
        rng: Random source; pass a seeded instance for reproducible output.
        now: Unix time the timestamps are relative to.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = rng or random.Random()
    if now is None:
        now = time.time()

    records = [
        Record(
            id=f"record-{i + 1}",
            timestamp=now - rng.randrange(24) * 3600,
            value=rng.random() * MAX_SAMPLE_VALUE,
            metadata={
                "category": rng.choice(SAMPLE_CATEGORIES),
                "priority": rng.randint(1, 5),
                "source": "generated",
            },
        )
        for i in range(count)
    ]
    logger.debug("Generated %d sample data records.", count)
    return records
