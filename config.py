"""
Centralized configuration for the SBC squad solver.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


# Squad shape
SQUAD_SIZE = _parse_int("SQUAD_SIZE", 11)
MAX_SQUAD_SIZE = _parse_int("MAX_SQUAD_SIZE", 23)  # Upper bound accepted by input validation

# Individual player rating bounds
MIN_PLAYER_RATING = _parse_int("MIN_PLAYER_RATING", 45)
MAX_PLAYER_RATING = _parse_int("MAX_PLAYER_RATING", 99)

# Solution limits
DEFAULT_MAX_SOLUTIONS = _parse_int("DEFAULT_MAX_SOLUTIONS", 50)  # Exhaustive search
OPTIMAL_MAX_SOLUTIONS = _parse_int("OPTIMAL_MAX_SOLUTIONS", 10)  # Precomputed table lookups

# Fast path: precomputed combinations are tried first when the inventory is larger than this
OPTIMAL_INVENTORY_THRESHOLD = _parse_int("OPTIMAL_INVENTORY_THRESHOLD", 50)
USE_OPTIMAL_COMBINATIONS = _parse_bool("USE_OPTIMAL_COMBINATIONS", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
