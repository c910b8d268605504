# app/services/mlb_statsapi.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from app.core.config import MLB_API_BASE, MLB_HTTP_TIMEOUT, MLB_SPORT_ID
from app.core.errors import UpstreamUnavailable
from app.models.live_types import ScheduleWindow

logger = logging.getLogger("app.mlb_statsapi")

HEADERS = {"User-Agent": "Mozilla/5.0", "Accept": "application/json"}

SCHEDULE_URL = f"{MLB_API_BASE}/v1/schedule"
LIVE_FEED_URL = MLB_API_BASE + "/v1.1/game/{game_pk}/feed/live"
BOXSCORE_URL = MLB_API_BASE + "/v1/game/{game_pk}/boxscore"


def new_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """One client per request; callers own it via `async with`."""
    return httpx.AsyncClient(timeout=MLB_HTTP_TIMEOUT, headers=HEADERS, transport=transport)


# ---------- HTTP helper ----------

async def _get_json(
    client: httpx.AsyncClient,
    resource: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Single GET, no retries. Any transport error, non-2xx status or
    non-object body becomes UpstreamUnavailable.
    """
    logger.info("statsapi GET %s url=%s params=%s", resource, url, params)
    try:
        r = await client.get(url, params=params)
        r.raise_for_status()
        data = r.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("statsapi %s failed: %s", resource, repr(e))
        raise UpstreamUnavailable(resource, e) from e

    if not isinstance(data, dict):
        logger.warning("statsapi %s returned %s, expected object", resource, type(data).__name__)
        raise UpstreamUnavailable(resource, TypeError(f"unexpected body type {type(data).__name__}"))
    return data


# ---------- Public API ----------

async def fetch_schedule(
    client: httpx.AsyncClient,
    team_id: int,
    window: ScheduleWindow,
) -> Dict[str, Any]:
    params = {
        "sportId": MLB_SPORT_ID,
        "teamId": team_id,
        "startDate": window["startDate"],
        "endDate": window["endDate"],
    }
    return await _get_json(client, "schedule", SCHEDULE_URL, params)


async def fetch_live_feed(client: httpx.AsyncClient, game_pk: Any) -> Dict[str, Any]:
    return await _get_json(client, "live feed", LIVE_FEED_URL.format(game_pk=game_pk))


async def fetch_boxscore(client: httpx.AsyncClient, game_pk: Any) -> Dict[str, Any]:
    return await _get_json(client, "boxscore", BOXSCORE_URL.format(game_pk=game_pk))


async def fetch_live_and_boxscore(
    client: httpx.AsyncClient,
    game_pk: Any,
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Issue the live feed and boxscore requests together and wait for both.
    The first failure propagates; no partial pair is ever returned.
    """
    live, box = await asyncio.gather(
        fetch_live_feed(client, game_pk),
        fetch_boxscore(client, game_pk),
    )
    return live, box
