# app/services/live_status.py
from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

import httpx

from app.core.config import TEAM_ID, TEAM_NAME
from app.models.live_types import LiveGameResponse, MessageResponse, NextGameResponse
from app.services import mlb_statsapi
from app.services.live_aggregator import aggregate_live_game
from app.services.mlb_common import today_in_schedule_tz
from app.services.schedule_resolver import (
    has_dated_entries,
    is_upcoming,
    next_game,
    schedule_window,
    select_game,
    summarize_game,
)

logger = logging.getLogger("app.live")

NO_GAMES_MESSAGE = "No games scheduled"
NO_TEAM_GAME_MESSAGE = f"No {TEAM_NAME} game found in window"

LiveStatus = Union[MessageResponse, NextGameResponse, LiveGameResponse]


async def _resolve(client: httpx.AsyncClient, today: date, team_id: int) -> LiveStatus:
    window = schedule_window(today)
    schedule = await mlb_statsapi.fetch_schedule(client, team_id, window)

    if not has_dated_entries(schedule):
        logger.info("no dated entries for team=%s window=%s", team_id, window)
        return {"message": NO_GAMES_MESSAGE}

    game = select_game(schedule, team_id)
    if game is None:
        logger.info("no selectable game for team=%s window=%s", team_id, window)
        return {"message": NO_TEAM_GAME_MESSAGE}

    summary = summarize_game(game)
    if is_upcoming(summary["status"]):
        logger.info("game %s upcoming (%s)", summary["gamePk"], summary["status"])
        return {"nextGame": next_game(summary, team_id)}

    logger.info("game %s live/final (%s)", summary["gamePk"], summary["status"])
    live, box = await mlb_statsapi.fetch_live_and_boxscore(client, summary["gamePk"])
    return {"liveGame": aggregate_live_game(live, box)}


async def get_live_status(
    today: Optional[date] = None,
    team_id: int = TEAM_ID,
    client: Optional[httpx.AsyncClient] = None,
) -> LiveStatus:
    """
    Build the /api/live payload: exactly one of message, nextGame or liveGame.

    `today` is fixed once per call so the schedule window cannot drift
    between upstream requests. Upstream failures propagate as
    UpstreamUnavailable.
    """
    day = today or today_in_schedule_tz()
    if client is not None:
        return await _resolve(client, day, team_id)
    async with mlb_statsapi.new_client() as owned:
        return await _resolve(owned, day, team_id)
