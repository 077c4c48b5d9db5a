"""Export of a record snapshot together with run metadata."""

import logging
import time
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from recordlens import __version__
from recordlens.core.models import Record

logger = logging.getLogger(__name__)


def export_snapshot(
    records: Sequence[Record],
    now: float | None = None,
) -> dict[str, Any]:
    """Package a snapshot for export.

    Args:
        records: Snapshot to export.
        now: Unix time stamped as exportTime (defaults to time.time()).

    Returns:
        Mapping with ``data`` (record dicts), ``exportTime`` (ISO 8601, UTC),
        ``recordCount`` and ``systemVersion``.
    """
    if now is None:
        now = time.time()
    export = {
        "data": [record.to_dict() for record in records],
        "exportTime": datetime.fromtimestamp(now, tz=timezone.utc).isoformat(),
        "recordCount": len(records),
        "systemVersion": __version__,
    }
    logger.info("Data exported successfully. Record count: %d", len(records))
    return export
