"""
Scouted data pipeline.

fetch -> select current set -> parse -> link -> envelope.

Every stage degrades instead of failing: an unreachable upstream or a
missing section produces empty collections, never an aborted build. The
one hard error is a payload that is present but not a JSON object, which
means the caller handed over the wrong thing.
"""

import asyncio
import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import httpx

from scouted.config import settings
from scouted.fetchers.cdragon import (
    UNKNOWN_PATCH,
    create_client,
    fetch_latest_patch,
    fetch_tft_data,
)
from scouted.models.scouted_data import BuildInfo, ScoutedData
from scouted.parsers.augments import parse_augments
from scouted.parsers.champions import parse_champions
from scouted.parsers.items import build_item_index, parse_items
from scouted.parsers.set_selector import UNKNOWN_SET_LABEL, select_current_set
from scouted.parsers.traits import parse_traits
from scouted.services.linker import link_champions_to_traits

logger = logging.getLogger(__name__)


class PayloadShapeError(TypeError):
    """Raised when the TFT export is present but is not a JSON object."""

    pass


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a "Z" suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def reference_list(value: Any) -> list[str]:
    """Set item/augment references, only when given as a list of apiName strings."""
    if isinstance(value, list) and value and isinstance(value[0], str):
        return [v for v in value if isinstance(v, str)]
    return []


def build_scouted_data(
    tft_data: Any,
    patch: str = UNKNOWN_PATCH,
    *,
    generated_at: datetime | None = None,
    tier_tags: Mapping[str, int] | None = None,
    cdragon_base: str | None = None,
) -> ScoutedData:
    """
    Transform one TFT export snapshot into the Scouted envelope.

    Args:
        tft_data: Decoded CDragon TFT export, or None if it could not be fetched
        patch: Latest patch string for provenance
        generated_at: Build time, defaults to now
        tier_tags: Augment tag id -> tier, defaults to configured augment_tier_tags
        cdragon_base: Asset root, defaults to configured cdragon_base

    Returns:
        ScoutedData; collections are empty when there is no usable set

    Raises:
        PayloadShapeError: If tft_data is present but not a JSON object
    """
    generated = format_timestamp(generated_at or datetime.now(UTC))
    if tier_tags is None:
        tier_tags = settings.augment_tier_tags

    if tft_data is None:
        logger.warning("No TFT data available, building empty collections")
        return ScoutedData(BuildInfo(generated_at=generated, patch=patch, set=UNKNOWN_SET_LABEL))

    if not isinstance(tft_data, dict):
        raise PayloadShapeError(
            f"TFT data must be a JSON object, got {type(tft_data).__name__}"
        )

    selection = select_current_set(tft_data.get("setData") or tft_data.get("sets"))
    if selection is None:
        logger.warning("TFT data has no sets, building empty collections")
        return ScoutedData(BuildInfo(generated_at=generated, patch=patch, set=UNKNOWN_SET_LABEL))

    current_set = selection.data
    raw_champions = _list(current_set.get("champions"))
    logger.info(
        "Auto-detected %s (mutator: %s, champions: %d)",
        selection.label,
        selection.mutator or "n/a",
        len(raw_champions),
    )

    champions = parse_champions(raw_champions, cdragon_base)
    traits = parse_traits(_list(current_set.get("traits")), cdragon_base)
    traits = link_champions_to_traits(champions, traits)

    item_index = build_item_index(_list(tft_data.get("items")))
    items = parse_items(reference_list(current_set.get("items")), item_index, cdragon_base)
    augments = parse_augments(
        reference_list(current_set.get("augments")), item_index, tier_tags, cdragon_base
    )

    data = ScoutedData(
        build_info=BuildInfo(generated_at=generated, patch=patch, set=selection.label),
        champions=tuple(champions),
        items=tuple(items),
        traits=tuple(traits),
        augments=tuple(augments),
    )
    counts = data.counts()
    logger.info(
        "Final: %d champions, %d items, %d traits, %d augments",
        counts["champions"],
        counts["items"],
        counts["traits"],
        counts["augments"],
    )
    return data


async def fetch_all_data(client: httpx.AsyncClient | None = None) -> ScoutedData:
    """
    Fetch the latest TFT export and patch, and build the envelope.

    Args:
        client: Optional HTTP client for connection reuse

    Returns:
        ScoutedData (empty collections if the export is unavailable)

    Raises:
        PayloadShapeError: If the export is not a JSON object
    """
    if client is None:
        async with create_client() as own_client:
            return await fetch_all_data(own_client)

    patch, tft_data = await asyncio.gather(
        fetch_latest_patch(client),
        fetch_tft_data(client),
    )
    return build_scouted_data(tft_data, patch)
