# app/services/schedule_resolver.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional

from app.core.config import SCHEDULE_WINDOW_DAYS
from app.models.live_types import GameSummary, NextGame, ScheduleWindow
from app.services.mlb_common import as_dict, as_id, as_list, dig, text_or_none

logger = logging.getLogger("app.schedule")

UPCOMING_MARKERS = ("Scheduled", "Pre-Game", "Warmup")
DEFAULT_STATUS = "Scheduled"


def schedule_window(today: date, days: int = SCHEDULE_WINDOW_DAYS) -> ScheduleWindow:
    """today .. today + (days - 1), both ends inclusive, as YYYY-MM-DD."""
    end = today + timedelta(days=max(1, days) - 1)
    return {"startDate": today.isoformat(), "endDate": end.isoformat()}


def has_dated_entries(schedule: Dict[str, Any]) -> bool:
    return bool(as_list(as_dict(schedule).get("dates")))


def _involves_team(game: Dict[str, Any], team_id: int) -> bool:
    home_id = as_id(dig(game, "teams", "home", "team", "id"))
    away_id = as_id(dig(game, "teams", "away", "team", "id"))
    return team_id in (home_id, away_id)


def select_game(schedule: Dict[str, Any], team_id: int) -> Optional[Dict[str, Any]]:
    """
    First date with games wins. Within it, prefer a game the target team
    plays in, otherwise take that date's first game.
    """
    for entry in as_list(as_dict(schedule).get("dates")):
        games = [g for g in as_list(as_dict(entry).get("games")) if isinstance(g, dict)]
        if not games:
            continue
        picked = next((g for g in games if _involves_team(g, team_id)), None)
        if picked is None:
            logger.info("no game for team=%s on %s, using first game", team_id, as_dict(entry).get("date"))
            return games[0]
        return picked
    return None


def game_status(game: Dict[str, Any]) -> str:
    status = as_dict(game.get("status"))
    return str(status.get("detailedState") or status.get("abstractGameState") or DEFAULT_STATUS)


def is_upcoming(status: str) -> bool:
    return any(marker in status for marker in UPCOMING_MARKERS)


def summarize_game(game: Dict[str, Any]) -> GameSummary:
    return {
        "gamePk": as_id(game.get("gamePk")),
        "status": game_status(game),
        "homeTeamId": as_id(dig(game, "teams", "home", "team", "id")),
        "awayTeamId": as_id(dig(game, "teams", "away", "team", "id")),
        "homeTeamName": text_or_none(dig(game, "teams", "home", "team", "name")),
        "awayTeamName": text_or_none(dig(game, "teams", "away", "team", "name")),
        "gameDate": text_or_none(game.get("gameDate")),
        "venueName": text_or_none(dig(game, "venue", "name")) or "",
    }


def next_game(summary: GameSummary, team_id: int) -> NextGame:
    # opponent is whichever side is not the target team
    if summary["homeTeamId"] == team_id:
        opponent = summary["awayTeamName"]
    else:
        opponent = summary["homeTeamName"]
    return {
        "opponent": opponent,
        "date": summary["gameDate"],
        "venue": summary["venueName"],
    }
