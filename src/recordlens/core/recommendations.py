"""Recommendation generation stage."""

import logging
from collections.abc import Sequence

from recordlens.core.config import AnalysisThresholds
from recordlens.core.models import Record

logger = logging.getLogger(__name__)

INCREASE_DATA_COLLECTION = "Consider increasing data collection for more robust analysis"
DATA_OUTDATED = "Data appears outdated - consider refreshing data sources"
NO_SPECIFIC_RECOMMENDATION = (
    "No specific recommendations based on current data, "
    "but continuous monitoring is advised."
)


def recent_fraction(
    records: Sequence[Record],
    now: float,
    window_seconds: float,
) -> float | None:
    """Fraction of records newer than ``now - window_seconds``.

    Returns:
        The fraction in [0, 1], or None for an empty snapshot.
    """
    if not records:
        return None
    cutoff = now - window_seconds
    recent = sum(1 for r in records if r.timestamp > cutoff)
    return recent / len(records)


def generate_recommendations(
    records: Sequence[Record],
    now: float,
    thresholds: AnalysisThresholds | None = None,
) -> list[str]:
    """Generate advisory strings based on data volume and recency.

    Args:
        records: Snapshot to inspect, possibly empty.
        now: Current Unix time used for the recency check.
        thresholds: Volume and recency limits (defaults if None).

    Returns:
        At least one recommendation. The fallback entry appears only when
        no other rule fired.
    """
    if thresholds is None:
        thresholds = AnalysisThresholds()

    recommendations: list[str] = []

    if len(records) < thresholds.min_records:
        recommendations.append(INCREASE_DATA_COLLECTION)

    fraction = recent_fraction(records, now, thresholds.recent_window_seconds)
    if fraction is not None and fraction < thresholds.min_recent_fraction:
        recommendations.append(DATA_OUTDATED)

    if not recommendations:
        recommendations.append(NO_SPECIFIC_RECOMMENDATION)

    logger.debug("Generated recommendations: %s", recommendations)
    return recommendations
