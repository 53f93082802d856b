"""
Community Dragon / Data Dragon fetcher.

Fetches the static TFT data export and the list of live patch versions.
Every fetch retries with exponential backoff and resolves to ``None``
once retries are exhausted, so a network failure never aborts a build.

Data: https://raw.communitydragon.org/latest/cdragon/tft/
"""

import asyncio
import logging
from typing import Any

import httpx

from scouted.config import settings

logger = logging.getLogger(__name__)

UNKNOWN_PATCH = "unknown"


def asset_url(path: str | None, base: str | None = None) -> str:
    """
    Convert a CDragon asset path to a full URL.

    Args:
        path: Game asset path (e.g. "ASSETS/UX/TFT/Champions/TFT15_Ahri.TFT_Set15.tex")
        base: CDragon root, defaults to configured cdragon_base

    Returns:
        Lower-cased absolute PNG URL, or "" if no path
    """
    if not path:
        return ""
    root = base if base is not None else settings.cdragon_base
    normalized = path.lower().replace(".dds", ".png").replace(".tex", ".png")
    return f"{root}/game/{normalized}"


def tft_data_url() -> str:
    """URL of the full TFT data export for the configured locale."""
    return f"{settings.cdragon_base}/cdragon/tft/{settings.locale}.json"


def versions_url() -> str:
    """URL of the Data Dragon versions list (newest first)."""
    return f"{settings.ddragon_base}/api/versions.json"


def create_client() -> httpx.AsyncClient:
    """HTTP client carrying the Scouted User-Agent."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.fetch_timeout_seconds,
    )


async def fetch_json(
    url: str,
    client: httpx.AsyncClient,
    *,
    retries: int | None = None,
    backoff: float | None = None,
) -> Any | None:
    """
    GET a URL and decode its JSON body, retrying on failure.

    Waits ``backoff * 2**attempt`` seconds between attempts.

    Args:
        url: URL to fetch
        client: HTTP client for connection reuse
        retries: Extra attempts after the first, defaults to configured fetch_retries
        backoff: Initial delay in seconds, defaults to configured fetch_backoff_seconds

    Returns:
        Decoded JSON payload, or None when every attempt failed
    """
    if retries is None:
        retries = settings.fetch_retries
    if backoff is None:
        backoff = settings.fetch_backoff_seconds

    for attempt in range(retries + 1):
        try:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            if attempt == retries:
                logger.error("Failed to fetch %s: %s", url, e)
                return None
            logger.warning("Fetch attempt %d for %s failed: %s", attempt + 1, url, e)
            await asyncio.sleep(backoff * 2**attempt)

    return None


async def fetch_latest_patch(client: httpx.AsyncClient) -> str:
    """
    Fetch the latest live patch string (e.g. "15.4.1").

    Returns:
        First entry of the versions list, or "unknown" if unavailable
    """
    versions = await fetch_json(versions_url(), client)
    if isinstance(versions, list) and versions and isinstance(versions[0], str):
        return versions[0]
    return UNKNOWN_PATCH


async def fetch_tft_data(client: httpx.AsyncClient) -> Any | None:
    """
    Fetch the full TFT data export.

    Returns:
        Decoded payload (expected to be a JSON object), or None if unavailable
    """
    return await fetch_json(tft_data_url(), client)
