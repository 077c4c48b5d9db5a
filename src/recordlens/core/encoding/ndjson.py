"""NDJSON encoders for records and analysis results."""

import json
from collections.abc import Iterable

from recordlens.core.models import AnalysisResult, Record


def encode_records(records: Iterable[Record]) -> str:
    """Encode records to newline-delimited JSON.

    Args:
        records: An iterable of Record objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    lines = [json.dumps(record.to_dict()) for record in records]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"


def encode_result(result: AnalysisResult) -> str:
    """Encode an analysis result as a single NDJSON line."""
    return json.dumps(result.to_dict()) + "\n"
