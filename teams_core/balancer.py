# teams_core/balancer.py
from __future__ import annotations
import logging
import math
from numbers import Integral, Real
from typing import List, Optional, Sequence, Tuple
import numpy as np

from .models import OptimizerConfig, Player, TeamsResult
from .refiner import hill_climb
from .scoring import score, strengths_of
from .seeder import greedy_seed
from .spice import spice

logger = logging.getLogger(__name__)


def shuffle(players: Sequence[Player], rng: np.random.Generator) -> List[Player]:
    return [players[int(k)] for k in rng.permutation(len(players))]


def _positive_whole(v) -> bool:
    # 4 and 4.0 are fine; True, 4.5, inf and nan are not
    if isinstance(v, bool) or not isinstance(v, Real):
        return False
    if isinstance(v, Integral):
        return v >= 1
    return math.isfinite(v) and v >= 1 and int(v) == v


def validate_dimensions(players: Sequence[Player], teams_count, per_team) -> Optional[str]:
    """Return None when the pool can be split as requested, else the reason it can't."""
    if not _positive_whole(teams_count):
        return f"invalid teams_count: {teams_count!r}"
    if not _positive_whole(per_team):
        return f"invalid per_team: {per_team!r}"
    expected = int(teams_count) * int(per_team)
    if players is None or len(players) != expected:
        got = None if players is None else len(players)
        return f"players length mismatch: got {got}, expected {expected}"
    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        return "duplicate player ids"
    return None


def run_count(pool_size: int, config: OptimizerConfig) -> int:
    """More restarts for bigger pools, clamped to [min_runs, max_runs]."""
    return min(config.max_runs, max(config.min_runs, pool_size))


def run_once(
    players: Sequence[Player],
    teams_count: int,
    per_team: int,
    rng: np.random.Generator,
    config: Optional[OptimizerConfig] = None,
) -> Tuple[List[List[Player]], float]:
    """One seed -> refine -> spice pass from a fresh shuffle."""
    config = config or OptimizerConfig()
    seeded = greedy_seed(shuffle(players, rng), teams_count, per_team, rng)
    refined = hill_climb(seeded, per_team, config.refine_max_iter)
    if config.spice_enabled:
        refined = spice(
            refined,
            rng,
            fraction=config.spice_fraction,
            tries=config.spice_tries,
            tolerance=config.spice_tolerance,
            base_epsilon=config.spice_base_epsilon,
        )
    return refined, score(refined)


def solve_teams(
    players: Sequence[Player],
    teams_count: int,
    per_team: int,
    rng: Optional[np.random.Generator] = None,
    config: Optional[OptimizerConfig] = None,
) -> TeamsResult:
    config = config or OptimizerConfig()
    err = validate_dimensions(players, teams_count, per_team)
    if err:
        logger.warning("build_balanced_teams: %s", err)
        return TeamsResult(error=err)

    teams_count, per_team = int(teams_count), int(per_team)
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    runs = run_count(len(players), config)
    best_teams: Optional[List[List[Player]]] = None
    best_score = float("inf")
    run_scores: List[float] = []

    for r in range(runs):
        teams, s = run_once(players, teams_count, per_team, rng, config)
        run_scores.append(s)
        logger.debug("run %d/%d score=%.6f", r + 1, runs, s)
        if s < best_score:
            best_score = s
            best_teams = teams

    logger.info("best of %d runs: variance=%.6f", runs, best_score)
    return TeamsResult(
        teams=best_teams or [],
        score=best_score,
        strengths=strengths_of(best_teams or []),
        run_scores=run_scores,
    )


def build_balanced_teams(
    players: Sequence[Player],
    teams_count: int,
    per_team: int,
    rng: Optional[np.random.Generator] = None,
    config: Optional[OptimizerConfig] = None,
) -> List[List[Player]]:
    """Split players into teams_count teams of per_team with the closest averages found.

    Returns an empty list when the inputs don't describe a valid split.
    """
    return solve_teams(players, teams_count, per_team, rng=rng, config=config).teams
