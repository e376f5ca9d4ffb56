# teams_core/spice.py
from __future__ import annotations
import logging
import math
from typing import List, Sequence
import numpy as np

from .constants import SPICE_BASE_EPSILON, SPICE_FRACTION, SPICE_TOLERANCE, SPICE_TRIES
from .models import Player
from .refiner import swap_allowed, swapped_strengths
from .scoring import strengths_of, variance

logger = logging.getLogger(__name__)


def bottom_indices(team: Sequence[Player], fraction: float) -> List[int]:
    """Indices of the lowest-rated `fraction` of a team (at least one)."""
    n = len(team)
    if n == 0:
        return []
    k = min(n, max(1, math.ceil(n * fraction)))
    ranked = sorted(range(n), key=lambda idx: team[idx].rating)
    return ranked[:k]


def spice(
    teams: Sequence[Sequence[Player]],
    rng: np.random.Generator,
    fraction: float = SPICE_FRACTION,
    tries: int = SPICE_TRIES,
    tolerance: float = SPICE_TOLERANCE,
    base_epsilon: float = SPICE_BASE_EPSILON,
) -> List[List[Player]]:
    """Shuffle weaker players between teams while the score stays within tolerance.

    Hill-climbing alone keeps landing on the same line-ups for a given roster;
    this mixes the bottom of each team without giving up much balance.
    """
    teams = [list(t) for t in teams]
    if len(teams) < 2:
        return teams

    # the bound comes from the input partition, not the running score
    start = variance(strengths_of(teams))
    limit = start + start * tolerance + base_epsilon

    accepted = 0
    for _ in range(tries):
        a, b = (int(x) for x in rng.choice(len(teams), size=2, replace=False))
        low_a = bottom_indices(teams[a], fraction)
        low_b = bottom_indices(teams[b], fraction)
        if not low_a or not low_b:
            continue
        i = low_a[int(rng.integers(len(low_a)))]
        j = low_b[int(rng.integers(len(low_b)))]
        if not swap_allowed(teams[a], i, teams[b], j):
            continue

        candidate = variance(swapped_strengths(teams, strengths_of(teams), a, i, b, j))
        if candidate <= limit:
            teams[a][i], teams[b][j] = teams[b][j], teams[a][i]
            accepted += 1

    logger.debug("spice accepted %d/%d swaps", accepted, tries)
    return teams
