"""
Runtime configuration, read from the environment (main.py loads .env first).

  REPLAY_PROFILE          fixture profile: "full" (default) or "brief"
  REPLAY_LEAD_MS          how far before startup the base time sits;
                          defaults to the profile's own lead
  REPLAY_ALLOWED_ORIGINS  comma-separated CORS origins
  LOG_LEVEL               stdlib logging level name, default INFO
"""

import os
from typing import Optional

DEFAULT_ORIGINS = ["http://localhost:5173", "http://localhost:8080"]


def replay_profile() -> str:
    return os.environ.get("REPLAY_PROFILE", "full").strip().lower()


def replay_lead_ms() -> Optional[int]:
    raw = os.environ.get("REPLAY_LEAD_MS")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"REPLAY_LEAD_MS must be an integer, got {raw!r}") from None


def allowed_origins() -> list[str]:
    raw = os.environ.get("REPLAY_ALLOWED_ORIGINS")
    if not raw:
        return list(DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
