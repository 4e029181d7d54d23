"""Centralised application settings (dotenv + env overrides)."""
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

ROOT = Path(__file__).parents[1]
load_dotenv(ROOT / ".env", override=False)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class settings:                            # pylint: disable=too-few-public-methods
    LOG_LEVEL               = os.getenv("LOG_LEVEL", "INFO").upper()
    COMFORT_THRESHOLD       = float(os.getenv("COMFORT_THRESHOLD", 18))
    ECO_TARGET              = int(os.getenv("ECO_TARGET", 18))
    COMFORT_TARGET          = int(os.getenv("COMFORT_TARGET", 22))
    DEFAULT_TEMPERATURE     = float(os.getenv("DEFAULT_TEMPERATURE", 20))
    FRONT_DOOR_NAME         = os.getenv("FRONT_DOOR_NAME", "Front Door")
    LIVING_ROOM_LIGHT_NAME  = os.getenv("LIVING_ROOM_LIGHT_NAME", "Living Room Light")
    BROADCAST_ADDRESS       = os.getenv("BROADCAST_ADDRESS", "all")
    RECORD_REFUSED_COMMANDS = _flag("RECORD_REFUSED_COMMANDS")
    DEMO_STEP_DELAY         = float(os.getenv("DEMO_STEP_DELAY", 0))
