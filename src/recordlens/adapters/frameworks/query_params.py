"""Shared query parameter parsing utilities for framework adapters."""

import math


def _parse_since_param(raw: str | None) -> float:
    """Parse and validate the 'since' query parameter.

    Args:
        raw: Raw parameter value, or None when absent.

    Returns:
        Timestamp as float, defaulting to 0.0 if invalid or missing.
        Rejects negative, NaN, and infinite values, returning 0.0 for these cases.
    """
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    if value < 0 or not math.isfinite(value):
        return 0.0
    return value
