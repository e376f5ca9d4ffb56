# FILE: teams_core/constants.py
from __future__ import annotations
import math

# --- Positions ---
POSITIONS = ["GK", "DEF", "MID", "ATT", "Any"]
PICKER_TABS = ["GK", "DEF", "MID", "ATT"]

# --- Match formats (players per team); None means the custom size input is used ---
FORMATS = [
    {"label": "5-a-side", "size": 5},
    {"label": "7-a-side", "size": 7},
    {"label": "8-a-side", "size": 8},
    {"label": "11-a-side", "size": 11},
    {"label": "Custom", "size": None},
]
DEFAULT_FORMAT_IDX = 2  # 8-a-side
CUSTOM_SIZE_MIN = 3
CUSTOM_SIZE_DEFAULT = 7
TEAM_COUNT_CHOICES = [2, 4, 6]

# --- Ratings ---
RATING_MIN = 1.0
RATING_MAX = 10.0
RATING_STEP = 0.5
DEFAULT_RATING = 7.0

# --- Optimizer ---
MIN_IMPROVEMENT = 1e-9      # refiner ignores gains below this (float noise)
REFINE_MAX_ITER = 300       # per run, from the driver
HILL_CLIMB_DEFAULT_ITER = 400
MIN_RUNS = 10
MAX_RUNS = 60

# Seeder jitter: amplitude = JITTER_BASE + JITTER_SLOPE * (RATING_MAX - rating)
JITTER_BASE = 0.05
JITTER_SLOPE = 0.08

SPICE_FRACTION = 0.35
SPICE_TRIES = 20
SPICE_TOLERANCE = 0.03
SPICE_BASE_EPSILON = 1e-4


def players_per_team(format_idx: int, custom_size: int | float | None) -> int:
    """Resolve the team size for a format, falling back to the custom size input."""
    size = FORMATS[format_idx]["size"]
    if size is None:
        try:
            val = float(custom_size)
        except (TypeError, ValueError):
            val = float(CUSTOM_SIZE_DEFAULT)
        if not math.isfinite(val):
            val = float(CUSTOM_SIZE_DEFAULT)
        size = max(CUSTOM_SIZE_MIN, val)
    return max(1, int(size))
