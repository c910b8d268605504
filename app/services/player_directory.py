# app/services/player_directory.py
from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

from app.services.mlb_common import as_dict, as_id, dig, text_or_none


def _key_to_id(key: Any, record: Dict[str, Any]) -> Optional[int]:
    # StatsAPI keys players as "ID<id>"; the record itself usually repeats it
    if isinstance(key, str) and key.startswith("ID"):
        pid = as_id(key[2:])
        if pid is not None:
            return pid
    return as_id(record.get("id")) or as_id(dig(record, "person", "id"))


class PlayerDirectory(Mapping[int, Dict[str, Any]]):
    """
    Player id -> player record, built once per request from an
    "ID<id>"-keyed StatsAPI mapping (gameData.players or a boxscore
    team's players).
    """

    def __init__(self, records: Optional[Dict[int, Dict[str, Any]]] = None):
        self._records: Dict[int, Dict[str, Any]] = dict(records or {})

    @classmethod
    def from_payload(cls, players: Any) -> "PlayerDirectory":
        records: Dict[int, Dict[str, Any]] = {}
        for key, rec in as_dict(players).items():
            if not isinstance(rec, dict):
                continue
            pid = _key_to_id(key, rec)
            if pid is not None:
                records[pid] = rec
        return cls(records)

    def __getitem__(self, player_id: int) -> Dict[str, Any]:
        return self._records[player_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def record(self, player_id: Any) -> Dict[str, Any]:
        pid = as_id(player_id)
        if pid is None:
            return {}
        return self._records.get(pid, {})

    def full_name(self, player_id: Any) -> Optional[str]:
        rec = self.record(player_id)
        return text_or_none(dig(rec, "person", "fullName")) or text_or_none(rec.get("fullName"))

    def pitch_hand(self, player_id: Any) -> Optional[str]:
        rec = self.record(player_id)
        return (
            text_or_none(dig(rec, "pitchHand", "code"))
            or text_or_none(dig(rec, "person", "pitchHand", "code"))
        )

    def bat_side(self, player_id: Any) -> Optional[str]:
        rec = self.record(player_id)
        return (
            text_or_none(dig(rec, "batSide", "code"))
            or text_or_none(dig(rec, "person", "batSide", "code"))
        )


# ---------- Layered resolvers ----------

def hand_suffix(code: Optional[str]) -> str:
    """'r' -> ' (R)'; no code -> ''."""
    return f" ({code.upper()})" if code else ""


def ref_player_id(ref: Any) -> Optional[int]:
    """Id from a reference that carries it directly or under player/person."""
    if not isinstance(ref, dict):
        return None
    return as_id(ref.get("id")) or as_id(dig(ref, "player", "id")) or as_id(dig(ref, "person", "id"))


def resolve_name(
    player_id: Any,
    preferred: Optional[PlayerDirectory] = None,
    fallback: Optional[PlayerDirectory] = None,
    own_name: Any = None,
) -> Optional[str]:
    """
    Name for a player id, trying `preferred`, then `fallback`, then the
    referencing object's own name field. None if nothing resolves.
    """
    for directory in (preferred, fallback):
        if directory is not None:
            name = directory.full_name(player_id)
            if name:
                return name
    return text_or_none(own_name)


def resolve_pitch_hand(
    player_id: Any,
    preferred: Optional[PlayerDirectory] = None,
    fallback: Optional[PlayerDirectory] = None,
) -> str:
    for directory in (preferred, fallback):
        if directory is not None:
            code = directory.pitch_hand(player_id)
            if code:
                return hand_suffix(code)
    return ""


def resolve_bat_side(player_id: Any, directory: PlayerDirectory) -> str:
    return hand_suffix(directory.bat_side(player_id))
