# app/services/mlb_common.py

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import SCHEDULE_TZ

logger = logging.getLogger("app.mlb_common")


# -----------------------------------------------------------
# Tolerant payload access
# -----------------------------------------------------------
def as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def dig(obj: Any, *keys: str) -> Any:
    """
    Walk nested dicts by key. Any missing key or non-dict hop yields None,
    so StatsAPI subtrees can be absent without special-casing each level.
    """
    cur = obj
    for k in keys:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(k)
    return cur


def as_id(value: Any) -> Optional[int]:
    """Normalize a StatsAPI id (int or numeric string) to int; falsy -> None."""
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


# -----------------------------------------------------------
# "Today" in the configured schedule timezone
# -----------------------------------------------------------
def today_in_schedule_tz(tz_name: Optional[str] = None) -> date:
    name = tz_name or SCHEDULE_TZ
    try:
        now = datetime.now(ZoneInfo(name))
    except ZoneInfoNotFoundError:
        logger.warning("unknown timezone '%s', falling back to UTC", name)
        now = datetime.now(timezone.utc)
    return now.date()
