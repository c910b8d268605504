# app/models/live_types.py
from typing_extensions import TypedDict
from typing import Dict, List, Optional


class ScheduleWindow(TypedDict):
    startDate: str
    endDate: str


class GameSummary(TypedDict):
    gamePk: Optional[int]
    status: str
    homeTeamId: Optional[int]
    awayTeamId: Optional[int]
    homeTeamName: Optional[str]
    awayTeamName: Optional[str]
    gameDate: Optional[str]
    venueName: str


class StarterInfo(TypedDict):
    id: Optional[int]
    name: Optional[str]
    hand: str


class AtBatState(TypedDict):
    pitcherName: Optional[str]
    batterName: Optional[str]
    balls: int
    strikes: int
    outs: int
    defenseAbbr: str
    offenseAbbr: str


class TeamSide(TypedDict):
    team: Optional[str]
    score: int


class LiveGame(TypedDict):
    away: TeamSide
    home: TeamSide
    inning: str
    starters: Dict[str, Optional[str]]
    currentPitcher: Optional[str]
    currentBatter: Optional[str]
    runners: Optional[List[str]]
    lastPlay: Optional[str]
    starterMismatch: bool


class NextGame(TypedDict):
    opponent: Optional[str]
    date: Optional[str]
    venue: str


class MessageResponse(TypedDict):
    message: str


class NextGameResponse(TypedDict):
    nextGame: NextGame


class LiveGameResponse(TypedDict):
    liveGame: LiveGame
