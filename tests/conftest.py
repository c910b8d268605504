# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, Optional

import httpx
import pytest

DODGERS = {"id": 119, "name": "Los Angeles Dodgers", "abbreviation": "LAD"}
GIANTS = {"id": 137, "name": "San Francisco Giants", "abbreviation": "SF"}


def schedule_game(
    status: str = "In Progress",
    home: Dict[str, Any] = DODGERS,
    away: Dict[str, Any] = GIANTS,
    game_pk: int = 745001,
    venue: Optional[str] = "Dodger Stadium",
) -> Dict[str, Any]:
    game: Dict[str, Any] = {
        "gamePk": game_pk,
        "gameDate": "2026-10-19T02:10:00Z",
        "status": {"abstractGameState": "Live", "detailedState": status},
        "teams": {
            "home": {"team": {"id": home["id"], "name": home["name"]}},
            "away": {"team": {"id": away["id"], "name": away["name"]}},
        },
    }
    if venue is not None:
        game["venue"] = {"id": 22, "name": venue}
    return game


def schedule_payload(*games: Dict[str, Any]) -> Dict[str, Any]:
    return {"dates": [{"date": "2026-10-19", "games": list(games)}]}


LIVE_FEED: Dict[str, Any] = {
    "gamePk": 745001,
    "gameData": {
        "status": {"abstractGameState": "Live", "detailedState": "In Progress"},
        "teams": {"home": DODGERS, "away": GIANTS},
        "probablePitchers": {
            "home": {"id": 543037, "fullName": "Gerrit Cole"},
            "away": {"id": 657277, "fullName": "Logan Webb"},
        },
        "players": {
            "ID543037": {"id": 543037, "fullName": "Gerrit Cole", "pitchHand": {"code": "R"}},
            "ID657277": {"id": 657277, "fullName": "Logan Webb", "pitchHand": {"code": "R"}},
            "ID660271": {"id": 660271, "fullName": "Shohei Ohtani", "batSide": {"code": "L"}},
            "ID605141": {"id": 605141, "fullName": "Mookie Betts", "batSide": {"code": "R"}},
            "ID518692": {"id": 518692, "fullName": "Freddie Freeman", "batSide": {"code": "L"}},
        },
    },
    "liveData": {
        "linescore": {
            "currentInning": 5,
            "inningState": "Top",
            "outs": 1,
            "teams": {"home": {"runs": 3}, "away": {"runs": 2}},
            "defense": {"team": {"id": 137}},
            "offense": {
                "team": {"id": 119},
                "first": {"id": 605141, "fullName": "Mookie Betts"},
                "third": {"id": 518692, "fullName": "Freddie Freeman"},
            },
        },
        "plays": {
            "currentPlay": {
                "result": {"description": "Mookie Betts singles on a line drive to left fielder."},
                "count": {"balls": 2, "strikes": 1, "outs": 1},
                "matchup": {
                    "batter": {"id": 660271, "fullName": "Shohei Ohtani"},
                    "pitcher": {"id": 657277, "fullName": "Logan Webb"},
                },
            }
        },
    },
}

BOXSCORE: Dict[str, Any] = {
    "teams": {
        "home": {
            "pitchers": [543037],
            "players": {
                "ID543037": {"person": {"id": 543037, "fullName": "Gerrit Cole"}, "pitchHand": {"code": "R"}},
            },
        },
        "away": {
            "pitchers": [657277],
            "players": {
                "ID657277": {"person": {"id": 657277, "fullName": "Logan Webb"}, "pitchHand": {"code": "r"}},
            },
        },
    }
}


@pytest.fixture
def live_feed() -> Dict[str, Any]:
    return copy.deepcopy(LIVE_FEED)


@pytest.fixture
def boxscore() -> Dict[str, Any]:
    return copy.deepcopy(BOXSCORE)


def statsapi_transport(
    schedule: Any = None,
    live: Any = None,
    box: Any = None,
    fail: Optional[str] = None,
    calls: Optional[list] = None,
) -> httpx.MockTransport:
    """
    Fake StatsAPI keyed on URL path. `fail` names the resource
    ("schedule", "live", "box") that answers 503 instead.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if calls is not None:
            calls.append(request)
        if path.endswith("/schedule"):
            name, body = "schedule", schedule
        elif path.endswith("/feed/live"):
            name, body = "live", live
        elif path.endswith("/boxscore"):
            name, body = "box", box
        else:
            return httpx.Response(404, json={"message": "not found"})
        if fail == name:
            return httpx.Response(503, text="Service Unavailable")
        return httpx.Response(200, json=body if body is not None else {})

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    def _make(**kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=statsapi_transport(**kwargs))

    return _make
