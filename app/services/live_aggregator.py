# app/services/live_aggregator.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from app.models.live_types import AtBatState, LiveGame, StarterInfo, TeamSide
from app.services.mlb_common import as_dict, as_id, as_list, dig, text_or_none
from app.services.player_directory import (
    PlayerDirectory,
    hand_suffix,
    ref_player_id,
    resolve_bat_side,
    resolve_name,
    resolve_pitch_hand,
)

logger = logging.getLogger("app.aggregator")

DEFAULT_HOME_ABBR = "HOME"
DEFAULT_AWAY_ABBR = "AWAY"

# linescore.offense key -> output label, in reporting order
BASES: Tuple[Tuple[str, str], ...] = (
    ("first", "1B"),
    ("second", "2B"),
    ("third", "3B"),
)


def _first_not_none(*values: Any) -> Any:
    return next((v for v in values if v is not None), None)


def _count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


# ---------- Team identity / inning / score ----------

def team_identity(live: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any], str, str]:
    """(home, away, home abbreviation, away abbreviation) from gameData.teams."""
    home = as_dict(dig(live, "gameData", "teams", "home"))
    away = as_dict(dig(live, "gameData", "teams", "away"))
    abbr_home = text_or_none(home.get("abbreviation")) or DEFAULT_HOME_ABBR
    abbr_away = text_or_none(away.get("abbreviation")) or DEFAULT_AWAY_ABBR
    return home, away, abbr_home, abbr_away


def inning_label(live: Dict[str, Any]) -> str:
    """
    "Top 5" when both the half and the inning number are known,
    otherwise the game's detailed status ("Final", "Delayed", ...), else "".
    """
    linescore = as_dict(dig(live, "liveData", "linescore"))
    state = linescore.get("inningState")
    inning = linescore.get("currentInning")
    if state and inning:
        return f"{state} {inning}"
    return str(dig(live, "gameData", "status", "detailedState") or "")


def team_side(team: Dict[str, Any], linescore: Dict[str, Any], side: str) -> TeamSide:
    runs = dig(linescore, "teams", side, "runs")
    return {"team": text_or_none(team.get("name")), "score": _count(runs) if runs is not None else 0}


# ---------- Starters ----------

def resolve_starter(
    box_team: Dict[str, Any],
    probable: Any,
    directory: PlayerDirectory,
) -> StarterInfo:
    """
    Confirmed starter is the first pitcher the boxscore lists for the team.
    If the boxscore gives no name, fall back to the announced probable
    pitcher, named from the game directory or the probable record itself.
    """
    box_players = PlayerDirectory.from_payload(box_team.get("players"))
    pitcher_ids = as_list(box_team.get("pitchers"))
    confirmed_id = as_id(pitcher_ids[0]) if pitcher_ids else None

    name: Optional[str] = None
    hand = ""
    if confirmed_id is not None:
        name = box_players.full_name(confirmed_id)
        if name:
            hand = resolve_pitch_hand(confirmed_id, box_players, directory)

    if not name and isinstance(probable, dict):
        prob_id = as_id(probable.get("id"))
        name = resolve_name(prob_id, directory, own_name=probable.get("fullName"))
        hand = ""
        if name:
            hand = resolve_pitch_hand(prob_id, directory) or hand_suffix(
                text_or_none(dig(probable, "pitchHand", "code"))
            )

    return {"id": confirmed_id, "name": name, "hand": hand}


def starter_label(starter: StarterInfo) -> Optional[str]:
    if not starter["name"]:
        return None
    return f"{starter['name']}{starter['hand']}"


def starter_mismatch(confirmed_id: Optional[int], probable: Any) -> bool:
    """Only a known confirmed id that differs from a known probable id counts."""
    probable_id = as_id(probable.get("id")) if isinstance(probable, dict) else None
    if confirmed_id is None or probable_id is None:
        return False
    return confirmed_id != probable_id


# ---------- Current at-bat ----------

def _side_abbr(team_id: Optional[int], home: Dict[str, Any], away: Dict[str, Any],
               abbr_home: str, abbr_away: str) -> str:
    if team_id is None:
        return ""
    if team_id == as_id(home.get("id")):
        return abbr_home
    if team_id == as_id(away.get("id")):
        return abbr_away
    return ""


def at_bat_state(
    live: Dict[str, Any],
    directory: PlayerDirectory,
    home: Dict[str, Any],
    away: Dict[str, Any],
    abbr_home: str,
    abbr_away: str,
) -> AtBatState:
    linescore = as_dict(dig(live, "liveData", "linescore"))
    play = as_dict(dig(live, "liveData", "plays", "currentPlay"))
    count = as_dict(play.get("count"))
    matchup = as_dict(play.get("matchup"))
    pitcher = as_dict(matchup.get("pitcher"))
    batter = as_dict(matchup.get("batter"))

    # the matchup's own name wins; the directory only fills gaps
    pitcher_name = text_or_none(pitcher.get("fullName")) or resolve_name(pitcher.get("id"), directory)
    batter_name = text_or_none(batter.get("fullName")) or resolve_name(batter.get("id"), directory)

    return {
        "pitcherName": pitcher_name,
        "batterName": batter_name,
        "balls": _count(_first_not_none(count.get("balls"), 0)),
        "strikes": _count(_first_not_none(count.get("strikes"), 0)),
        "outs": _count(_first_not_none(linescore.get("outs"), count.get("outs"), 0)),
        "defenseAbbr": _side_abbr(as_id(dig(linescore, "defense", "team", "id")), home, away, abbr_home, abbr_away),
        "offenseAbbr": _side_abbr(as_id(dig(linescore, "offense", "team", "id")), home, away, abbr_home, abbr_away),
    }


def current_pitcher_label(state: AtBatState, pitcher_id: Any, directory: PlayerDirectory) -> Optional[str]:
    if not state["pitcherName"]:
        return None
    prefix = f"{state['defenseAbbr']}: " if state["defenseAbbr"] else ""
    return f"{prefix}{state['pitcherName']}{resolve_pitch_hand(pitcher_id, directory)}"


def current_batter_label(state: AtBatState, batter_id: Any, directory: PlayerDirectory) -> Optional[str]:
    if not state["batterName"]:
        return None
    prefix = f"{state['offenseAbbr']}: " if state["offenseAbbr"] else ""
    outs = state["outs"]
    plural = "" if outs == 1 else "s"
    return (
        f"{prefix}{state['batterName']}{resolve_bat_side(batter_id, directory)}"
        f" — Count {state['balls']}-{state['strikes']}, {outs} out{plural}"
    )


# ---------- Runners ----------

def runners_on_base(live: Dict[str, Any], directory: PlayerDirectory) -> Optional[List[str]]:
    offense = as_dict(dig(live, "liveData", "linescore", "offense"))
    lines: List[str] = []
    for key, label in BASES:
        ref = offense.get(key)
        pid = ref_player_id(ref)
        if pid is None:
            continue
        name = resolve_name(pid, directory)
        if name:
            lines.append(f"{label}: {name}")
    return lines or None


# ---------- Assembly ----------

def aggregate_live_game(live: Dict[str, Any], box: Dict[str, Any]) -> LiveGame:
    """
    Fold the live feed and boxscore for one game into the liveGame shape.
    Missing subtrees never raise; they become null or the documented default.
    """
    live = as_dict(live)
    box = as_dict(box)

    directory = PlayerDirectory.from_payload(dig(live, "gameData", "players"))
    home, away, abbr_home, abbr_away = team_identity(live)
    linescore = as_dict(dig(live, "liveData", "linescore"))

    prob_home = dig(live, "gameData", "probablePitchers", "home")
    prob_away = dig(live, "gameData", "probablePitchers", "away")
    home_starter = resolve_starter(as_dict(dig(box, "teams", "home")), prob_home, directory)
    away_starter = resolve_starter(as_dict(dig(box, "teams", "away")), prob_away, directory)

    starters: Dict[str, Optional[str]] = {
        abbr_away: starter_label(away_starter),
        abbr_home: starter_label(home_starter),
    }

    state = at_bat_state(live, directory, home, away, abbr_home, abbr_away)
    play = as_dict(dig(live, "liveData", "plays", "currentPlay"))
    pitcher_id = dig(play, "matchup", "pitcher", "id")
    batter_id = dig(play, "matchup", "batter", "id")

    inning = inning_label(live)
    mismatch = (
        starter_mismatch(home_starter["id"], prob_home)
        or starter_mismatch(away_starter["id"], prob_away)
    )

    logger.info(
        "aggregated game %s: inning=%r starters=%s mismatch=%s",
        dig(live, "gamePk") or dig(live, "gameData", "game", "pk"),
        inning,
        starters,
        mismatch,
    )

    return {
        "away": team_side(away, linescore, "away"),
        "home": team_side(home, linescore, "home"),
        "inning": inning,
        "starters": starters,
        "currentPitcher": current_pitcher_label(state, pitcher_id, directory),
        "currentBatter": current_batter_label(state, batter_id, directory),
        "runners": runners_on_base(live, directory),
        "lastPlay": text_or_none(dig(play, "result", "description")),
        "starterMismatch": bool(mismatch),
    }
