"""Async place-search client for a Nominatim-compatible geocoding API."""

import asyncio
import logging

import httpx

from route_planner.config import settings
from route_planner.core.suggestion import Place

logger = logging.getLogger(__name__)

# Retry configuration
MAX_RETRIES = 3
RETRY_BACKOFF = [1, 2, 4]  # seconds between retries


class Geocoder:
    """Resolves free-text place names to coordinates."""

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.geocoder_base_url,
            timeout=10.0,
            headers={"Accept": "application/json", "User-Agent": settings.geocoder_user_agent},
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _get_with_retry(self, path: str, params: dict, label: str) -> httpx.Response | None:
        """GET request with retry and exponential backoff."""
        for attempt in range(MAX_RETRIES + 1):
            try:
                resp = await self._client.get(path, params=params)
                resp.raise_for_status()
                return resp
            except (httpx.ReadTimeout, httpx.ConnectTimeout, httpx.ConnectError) as e:
                if attempt < MAX_RETRIES:
                    wait = RETRY_BACKOFF[attempt]
                    logger.warning(
                        "%s attempt %d/%d failed (%s), retrying in %ds",
                        label, attempt + 1, MAX_RETRIES + 1, type(e).__name__, wait,
                    )
                    await asyncio.sleep(wait)
                else:
                    logger.error("%s failed after %d attempts: %s", label, MAX_RETRIES + 1, e)
                    return None
            except httpx.HTTPStatusError as e:
                if e.response.status_code >= 500 and attempt < MAX_RETRIES:
                    wait = RETRY_BACKOFF[attempt]
                    logger.warning(
                        "%s attempt %d/%d got HTTP %d, retrying in %ds",
                        label, attempt + 1, MAX_RETRIES + 1, e.response.status_code, wait,
                    )
                    await asyncio.sleep(wait)
                else:
                    logger.error("Geocoder %s failed: %s", label, e)
                    return None
            except httpx.HTTPError:
                logger.exception("Geocoder %s failed", label)
                return None
        return None

    async def search(self, text: str, limit: int = 5) -> list[Place]:
        """Places matching text, best match first. Empty on failure."""
        resp = await self._get_with_retry(
            "/search", {"q": text, "format": "jsonv2", "limit": limit}, "place search",
        )
        if resp is None:
            return []
        try:
            data = resp.json()
        except ValueError:
            logger.exception("Failed to parse geocoder response")
            return []

        places = []
        for item in data if isinstance(data, list) else []:
            try:
                places.append(Place(
                    name=str(item.get("name") or item.get("display_name", "")),
                    lat=float(item["lat"]),
                    lng=float(item["lon"]),
                ))
            except (KeyError, ValueError, TypeError) as e:
                logger.debug("Skipping malformed geocoder record: %s", e)
        logger.info("Geocoder %r: %d places", text, len(places))
        return places
