# teams_core/ratings.py
from __future__ import annotations
import math
import re

from .constants import DEFAULT_RATING, RATING_MAX, RATING_MIN

_NON_ID = re.compile(r"[^a-z0-9]")
_SPACES = re.compile(r"\s+")


def normalize_rating(value, default: float = DEFAULT_RATING) -> float:
    """Clamp to 1..10 and snap to the nearest half point."""
    try:
        r = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(r):
        return default
    return max(RATING_MIN, min(RATING_MAX, math.floor(r * 2 + 0.5) / 2))


def id_of(name: str) -> str:
    return _NON_ID.sub("", _SPACES.sub("", str(name).lower()))
