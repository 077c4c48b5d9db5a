"""Insight generation stage.

Two observations are produced, in this order:

1. Dominant category: the share of the most frequent ``category`` value.
   Ties go to the category seen first in the snapshot.
2. High-value outliers: how many records exceed the configured multiple of
   the mean value.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from operator import itemgetter

from recordlens.core.config import AnalysisThresholds
from recordlens.core.metadata import string_field
from recordlens.core.models import Record
from recordlens.core.summary import mean_value, round_half_up

logger = logging.getLogger(__name__)


def category_counts(
    records: Sequence[Record],
    thresholds: AnalysisThresholds,
) -> Counter[str]:
    """Count records per category, keyed in first-encountered order.

    Raises:
        TypeError: If a category value is not a supported metadata variant.
    """
    return Counter(
        string_field(r.metadata, thresholds.category_key, thresholds.unknown_category)
        for r in records
    )


def dominant_category(counts: Counter[str]) -> tuple[str, int] | None:
    """Return the most frequent category and its count.

    ``max`` keeps the first maximal item, and Counter preserves insertion
    order, so ties resolve to the category encountered first.
    """
    if not counts:
        return None
    return max(counts.items(), key=itemgetter(1))


def count_high_values(records: Sequence[Record], multiplier: float) -> int:
    """Count records whose value exceeds ``multiplier`` times the mean."""
    limit = mean_value(records) * multiplier
    return sum(1 for r in records if r.value > limit)


def generate_insights(
    records: Sequence[Record],
    thresholds: AnalysisThresholds | None = None,
) -> list[str]:
    """Generate human-readable observations about a snapshot.

    Args:
        records: Snapshot to inspect, possibly empty.
        thresholds: Category key and outlier multiplier (defaults if None).

    Returns:
        Insight strings; empty when there is nothing to report.
    """
    if thresholds is None:
        thresholds = AnalysisThresholds()

    insights: list[str] = []

    dominant = dominant_category(category_counts(records, thresholds))
    if dominant is not None:
        name, count = dominant
        percentage = round_half_up(count * 100.0 / len(records), places=1)
        insights.append(f"Category '{name}' represents {percentage:.1f}% of all data")

    high_value_count = count_high_values(records, thresholds.high_value_multiplier)
    if high_value_count > 0:
        insights.append(
            f"{high_value_count} records show significantly high values "
            f"(>{thresholds.high_value_multiplier * 100:.0f}% of average)"
        )

    logger.debug("Generated insights: %s", insights)
    return insights
