# FILE: teams_core/__init__.py
"""
teams_core package: player models, scoring, seeding, local search, multi-start balancing, IO, and sharing.
"""
from .models import Player, OptimizerConfig, TeamsResult
from .balancer import build_balanced_teams, solve_teams

__all__ = [
    "Player",
    "OptimizerConfig",
    "TeamsResult",
    "build_balanced_teams",
    "solve_teams",
]
