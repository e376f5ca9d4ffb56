# teams_core/seeder.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from .constants import JITTER_BASE, JITTER_SLOPE, RATING_MAX
from .models import Player
from .scoring import team_strength


def jitter(rating: float, rng: np.random.Generator) -> float:
    """Zero-mean noise; weaker players get a wider spread so they don't always cluster."""
    amp = JITTER_BASE + JITTER_SLOPE * max(0.0, RATING_MAX - rating)
    return float(rng.uniform(-amp, amp))


def greedy_seed(
    players: Sequence[Player],
    teams_count: int,
    per_team: int,
    rng: np.random.Generator,
) -> List[List[Player]]:
    """Build one starting partition.

    - Spread dedicated keepers one per team, in the order received
    - Then place everyone else strongest-first (on a jittered key)
      into whichever team currently has the lowest average and a free slot
    """
    if len(players) != teams_count * per_team:
        raise ValueError(
            f"Expected {teams_count * per_team} players for {teams_count}x{per_team}, got {len(players)}"
        )

    teams: List[List[Player]] = [[] for _ in range(teams_count)]
    gks = [p for p in players if p.is_gk]
    others = [p for p in players if not p.is_gk]

    unplaced_gks: List[Player] = []
    for i, gk in enumerate(gks):
        t = i % teams_count
        if i < teams_count and len(teams[t]) < per_team:
            teams[t].append(gk)
        else:
            unplaced_gks.append(gk)

    pool = others + unplaced_gks
    keys = [p.rating + jitter(p.rating, rng) for p in pool]
    order = sorted(range(len(pool)), key=lambda k: keys[k], reverse=True)

    for k in order:
        best_idx = -1
        best_avg = float("inf")
        for t in range(teams_count):
            if len(teams[t]) >= per_team:
                continue
            avg = team_strength(teams[t])
            if avg < best_avg:
                best_avg = avg
                best_idx = t
        teams[best_idx].append(pool[k])

    return teams
