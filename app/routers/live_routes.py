# app/routers/live_routes.py
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.services.live_status import get_live_status

router = APIRouter(tags=["Live"])
logger = logging.getLogger("app.live")

FETCH_FAILED = "Failed to fetch game data"


@router.get("/live")
async def live_game():
    """
    Next or current game for the target team: a message, the upcoming
    game, or the live/final game state.
    """
    try:
        return await get_live_status()
    except Exception as e:
        logger.exception("live status failed: %s", e)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED, "detail": str(e)})
