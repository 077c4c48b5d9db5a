"""Example FastAPI application exposing record analysis endpoints.

Run with:
    uvicorn examples.fastapi_example:app --reload

Endpoints:
    /records              - NDJSON records (all entries)
    /records?since=<ts>   - NDJSON records newer than timestamp
    POST /records         - Append a JSON array of records
    /analysis             - Run an analysis over the current snapshot
    /export               - Snapshot export with metadata
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recordlens.adapters.frameworks.fastapi import create_analysis_router
from recordlens.adapters.logging import configure_logging
from recordlens.core.config import EngineConfig
from recordlens.system import ProcessingSystem

config = EngineConfig(sample_size=250)
configure_logging(config)
system = ProcessingSystem(config)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    system.initialize().result()
    yield
    system.shutdown()


app = FastAPI(title="Record Analysis Example", lifespan=lifespan)
app.include_router(create_analysis_router(system))


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Hello! Check /analysis and /records endpoints."}
