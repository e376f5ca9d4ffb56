# teams_core/reports.py
from __future__ import annotations
from typing import Optional, Sequence
import numpy as np
import pandas as pd

from .models import Player
from .scoring import team_strength
from .share import BIB


def team_label(idx: int, bib_idx: Optional[int] = None) -> str:
    return f"{BIB} Team {idx + 1}" if bib_idx == idx else f"Team {idx + 1}"


def player_cell(p: Player) -> str:
    if p.is_gk:
        return f"{p.name} (GK)"
    badge = "*" if p.can_play_gk else ""
    return f"{p.name}{badge} [{p.position}]"


def teams_summary_df(teams: Sequence[Sequence[Player]], bib_idx: Optional[int] = None) -> pd.DataFrame:
    rows = []
    for i, t in enumerate(teams):
        rows.append({
            "team": team_label(i, bib_idx),
            "average": round(team_strength(t), 2),
            "total": float(np.sum([p.rating for p in t])) if t else 0.0,
            "goalkeepers": sum(1 for p in t if p.is_gk),
            "players": len(t),
        })
    return pd.DataFrame(rows, columns=["team", "average", "total", "goalkeepers", "players"])


def teams_grid_df(teams: Sequence[Sequence[Player]], bib_idx: Optional[int] = None) -> pd.DataFrame:
    """Slot rows x team columns; keepers are listed first within each team."""
    if not teams:
        return pd.DataFrame()
    size = max(len(t) for t in teams)
    data = {}
    for i, t in enumerate(teams):
        ordered = sorted(t, key=lambda p: (not p.is_gk, -p.rating, p.name))
        col = [player_cell(p) for p in ordered] + [""] * (size - len(ordered))
        data[team_label(i, bib_idx)] = col
    return pd.DataFrame(data, index=[f"#{k + 1}" for k in range(size)])
