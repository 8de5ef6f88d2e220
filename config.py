"""
config.py — Settings
=====================
Module-level constants used across the project, plus AppConfig for the
web layer (read from environment variables).
"""

import os
import secrets
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Playback — speed presets are multipliers on BASE_DELAY_SECONDS
# ---------------------------------------------------------------------------
BASE_DELAY_SECONDS = 1.0
MIN_DELAY_SECONDS  = 0.02

SPEED_PRESETS = {
    "slow":   0.5,    # teaching mode
    "medium": 1.0,
    "fast":   2.5,    # demo mode
    "turbo":  8.0,
}

# ---------------------------------------------------------------------------
# Structures
# ---------------------------------------------------------------------------
DEFAULT_HASH_CAPACITY = 10
LOAD_FACTOR_WARNING   = 0.7

# ---------------------------------------------------------------------------
# Random seed data
# ---------------------------------------------------------------------------
DEFAULT_ARRAY_SIZE = 12
VALUE_RANGE        = (5, 100)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    secret_key: str  = field(default_factory=lambda: secrets.token_hex(32))
    debug:      bool = False
    max_items:  int  = 200     # largest container the API will animate

    @classmethod
    def from_env(cls) -> "AppConfig":
        cfg = cls(debug=_env_flag("VISUALIZER_DEBUG"))
        key = os.environ.get("VISUALIZER_SECRET_KEY")
        if key:
            cfg.secret_key = key
        max_items = os.environ.get("VISUALIZER_MAX_ITEMS")
        if max_items:
            cfg.max_items = int(max_items)
        return cfg
