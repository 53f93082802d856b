"""
Health check endpoints.

Provides a liveness probe and a readiness probe reporting whether the
envelope has been built in this process.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from scouted.api.data import DataStore, get_data_store

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    data: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not touch upstream data.
    """
    return HealthResponse(status="healthy")


@router.get("/ready", response_model=HealthResponse)
async def ready(store: Annotated[DataStore, Depends(get_data_store)]) -> HealthResponse:
    """
    Readiness probe.

    Always ready; reports whether the envelope is already cached.
    """
    return HealthResponse(status="ready", data="cached" if store.is_loaded else "not loaded")
