# app/core/config.py
from __future__ import annotations

import logging
import os

logger = logging.getLogger("app.config")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("config: %s=%r is not an int, using %s", name, raw, default)
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config: %s=%r is not a number, using %s", name, raw, default)
        return default


# ------------ Server ------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ------------ Target team ------------
TEAM_ID = _int_env("TEAM_ID", 119)  # Dodgers
TEAM_NAME = os.getenv("TEAM_NAME", "Dodgers")

# ------------ Upstream (MLB StatsAPI) ------------
MLB_API_BASE = os.getenv("MLB_API_BASE", "https://statsapi.mlb.com/api").rstrip("/")
MLB_SPORT_ID = _int_env("MLB_SPORT_ID", 1)
MLB_HTTP_TIMEOUT = _float_env("MLB_HTTP_TIMEOUT", 10.0)

# ------------ Schedule window ------------
SCHEDULE_TZ = os.getenv("SCHEDULE_TZ", "UTC")
SCHEDULE_WINDOW_DAYS = max(1, _int_env("SCHEDULE_WINDOW_DAYS", 7))
