"""Summary statistics stage."""

import logging
import math
from collections.abc import Sequence
from decimal import ROUND_FLOOR, Decimal

from recordlens.core.models import Record

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals, with halves rounded towards +infinity.

    Matches ``floor(value * 10**places + 0.5) / 10**places``, so -0.125
    rounds to -0.12 and 0.125 to 0.13.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    shifted = Decimal(repr(value)) + quantum / 2
    return float(shifted.quantize(quantum, rounding=ROUND_FLOOR))


def mean_value(records: Sequence[Record]) -> float:
    """Arithmetic mean of record values, 0.0 for an empty sequence."""
    if not records:
        return 0.0
    return math.fsum(r.value for r in records) / len(records)


def compute_summary(records: Sequence[Record]) -> dict[str, float]:
    """Compute aggregate statistics over a record snapshot.

    Args:
        records: Snapshot to summarize, possibly empty.

    Returns:
        Mapping with totalRecords, averageValue (rounded to 2 decimals),
        maxValue and minValue. Every value is 0.0 for an empty snapshot.
    """
    values = [r.value for r in records]
    summary = {
        "totalRecords": float(len(values)),
        "averageValue": round_half_up(mean_value(records)),
        "maxValue": max(values, default=0.0),
        "minValue": min(values, default=0.0),
    }
    logger.debug("Calculated summary statistics: %s", summary)
    return summary
