"""
Scouted data endpoint.

Serves the envelope built by the pipeline. The envelope is built once
per process, on the first request that reaches upstream; restarting the
process supersedes it.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends

from scouted.models.scouted_data import ScoutedData
from scouted.parsers.set_selector import UNKNOWN_SET_LABEL
from scouted.schemas import ScoutedDataResponse
from scouted.services.pipeline import fetch_all_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])


class DataStore:
    """Builds the envelope once and serves it from memory afterwards."""

    def __init__(self, builder: Callable[[], Awaitable[ScoutedData]] = fetch_all_data) -> None:
        self._builder = builder
        self._data: ScoutedData | None = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    async def get(self) -> ScoutedData:
        """
        Cached envelope, building it on first use.

        A degraded build (no set detected, so empty collections) is served
        but not cached; the next request tries upstream again.
        """
        if self._data is not None:
            return self._data

        async with self._lock:
            if self._data is not None:
                return self._data

            logger.info("Building Scouted data...")
            data = await self._builder()
            if data.build_info.set == UNKNOWN_SET_LABEL:
                logger.warning("Upstream data unavailable, not caching empty envelope")
                return data

            self._data = data
            return data


_store = DataStore()


def get_data_store() -> DataStore:
    """Dependency returning the process-wide store."""
    return _store


@router.get("", response_model=ScoutedDataResponse, response_model_by_alias=True)
async def get_data(
    store: Annotated[DataStore, Depends(get_data_store)],
) -> ScoutedDataResponse:
    """
    Full envelope: champions, items, traits, augments and build info.

    Upstream failures yield empty collections rather than an error.
    """
    return ScoutedDataResponse.from_data(await store.get())
