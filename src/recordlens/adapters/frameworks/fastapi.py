"""FastAPI adapter exposing record ingestion and analysis endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from recordlens.adapters.frameworks.query_params import _parse_since_param
from recordlens.core.encoding.ndjson import encode_records
from recordlens.core.errors import ProcessingError
from recordlens.core.models import Record
from recordlens.system import ProcessingSystem

logger = logging.getLogger(__name__)


class RecordIn(BaseModel):
    """Request body for a single record."""

    id: str
    timestamp: float
    value: float
    metadata: dict[str, str | int | float | bool] = Field(default_factory=dict)

    def to_record(self) -> Record:
        return Record(
            id=self.id,
            timestamp=self.timestamp,
            value=self.value,
            metadata=self.metadata,
        )


def create_analysis_router(system: ProcessingSystem) -> APIRouter:
    """Create a FastAPI router with /records, /analysis and /export endpoints.

    Args:
        system: Processing system whose store and analyzer back the endpoints.

    Returns:
        APIRouter with the endpoints configured.
    """
    router = APIRouter()

    @router.get("/records")
    async def get_records(since: str | None = Query(default=None)) -> Response:
        """Return stored records in NDJSON format.

        Args:
            since: Unix timestamp. Returns records with timestamp > since.
        """
        since_ts = _parse_since_param(since)
        records = [r async for r in system.store.read(since=since_ts)]
        return Response(
            content=encode_records(records),
            media_type="application/x-ndjson",
        )

    @router.post("/records", status_code=201)
    async def post_records(payload: list[RecordIn]) -> dict[str, int]:
        """Append records to the store."""
        system.add_records(item.to_record() for item in payload)
        return {"accepted": len(payload), "recordCount": system.store.count()}

    @router.get("/analysis")
    async def get_analysis() -> Response:
        """Analyze the current snapshot and return the result as JSON."""
        try:
            result = await system.process_data_async()
        except ProcessingError as exc:
            logger.warning("Analysis request failed: %s", exc.cause)
            return JSONResponse({"error": "Data processing failed"}, status_code=500)
        except RuntimeError as exc:
            if not system.is_shutdown:
                raise
            logger.warning("Analysis request rejected: %s", exc)
            return JSONResponse(
                {"error": "Processing system is shut down"}, status_code=503
            )
        return JSONResponse(result.to_dict())

    @router.get("/export")
    async def get_export() -> dict[str, Any]:
        """Return the export document for the current snapshot."""
        return system.export_data()

    return router
