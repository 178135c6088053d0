# votingsystem/settings.py
# Environment settings for the HTTP host; the ledger itself never reads these
import logging
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(name: str) -> str:
    """Upper-cased level name, or INFO when `name` is not a logging level."""
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.getenv("VOTING_LOG_LEVEL", DEFAULT_LOG_LEVEL))

APP_TITLE = os.getenv("VOTING_APP_TITLE", "Online Voting System API")

# Comma separated list, e.g. "http://localhost:3000,http://localhost:5173"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "VOTING_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]
