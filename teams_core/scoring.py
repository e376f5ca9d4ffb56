# teams_core/scoring.py
from __future__ import annotations
from typing import List, Sequence

from .models import Player


def mean(xs: Sequence[float]) -> float:
    return sum(xs) / len(xs) if xs else 0.0


def variance(xs: Sequence[float]) -> float:
    """Population variance (divides by n, not n-1)."""
    if not xs:
        return 0.0
    m = mean(xs)
    return sum((x - m) ** 2 for x in xs) / len(xs)


def team_strength(team: Sequence[Player]) -> float:
    return mean([p.rating for p in team]) if team else 0.0


def strengths_of(teams: Sequence[Sequence[Player]]) -> List[float]:
    return [team_strength(t) for t in teams]


def score(teams: Sequence[Sequence[Player]]) -> float:
    """Variance of team averages; 0 means every team has the same mean rating."""
    return variance(strengths_of(teams))
