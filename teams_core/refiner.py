# teams_core/refiner.py
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .constants import HILL_CLIMB_DEFAULT_ITER, MIN_IMPROVEMENT
from .models import Player
from .scoring import strengths_of, variance


def swap_allowed(team_a: Sequence[Player], i: int, team_b: Sequence[Player], j: int) -> bool:
    """A swap may not take away a team's only dedicated keeper."""
    pa, pb = team_a[i], team_b[j]
    a_has_other = any(x.is_gk for k, x in enumerate(team_a) if k != i)
    b_has_other = any(x.is_gk for k, x in enumerate(team_b) if k != j)
    if pa.is_gk and not a_has_other:
        return False
    if pb.is_gk and not b_has_other:
        return False
    return True


def swapped_strengths(
    teams: Sequence[Sequence[Player]],
    strengths: Sequence[float],
    a: int, i: int, b: int, j: int,
) -> List[float]:
    """Team averages after swapping teams[a][i] and teams[b][j]; only a and b change."""
    pa, pb = teams[a][i], teams[b][j]
    na, nb = len(teams[a]), len(teams[b])
    out = list(strengths)
    out[a] = (strengths[a] * na - pa.rating + pb.rating) / na
    out[b] = (strengths[b] * nb - pb.rating + pa.rating) / nb
    return out


def hill_climb(
    teams: Sequence[Sequence[Player]],
    per_team: int,
    max_iter: int = HILL_CLIMB_DEFAULT_ITER,
) -> List[List[Player]]:
    """Steepest-improvement pairwise swaps until no swap helps or max_iter is hit.

    Each iteration scans every (team a, team b, i, j) combination:
    O(teams^2 * per_team^2). Fine for tens of players; beyond that, restrict
    the candidate pairs instead of scanning all of them.

    Raises ValueError when a team does not hold exactly per_team players.
    """
    teams = [list(t) for t in teams]
    sizes = [len(t) for t in teams]
    if any(n != per_team for n in sizes):
        raise ValueError(f"team sizes {sizes} do not match per_team={per_team}")
    for _ in range(max_iter):
        strengths = strengths_of(teams)
        base_var = variance(strengths)
        best_delta = 0.0
        best_swap: Optional[Tuple[int, int, int, int]] = None

        for a in range(len(teams)):
            for b in range(a + 1, len(teams)):
                for i in range(len(teams[a])):
                    for j in range(len(teams[b])):
                        if not swap_allowed(teams[a], i, teams[b], j):
                            continue
                        new_var = variance(swapped_strengths(teams, strengths, a, i, b, j))
                        delta = base_var - new_var
                        if delta > best_delta + MIN_IMPROVEMENT:
                            best_delta = delta
                            best_swap = (a, i, b, j)

        if best_swap is None:
            break
        a, i, b, j = best_swap
        teams[a][i], teams[b][j] = teams[b][j], teams[a][i]

    return teams
