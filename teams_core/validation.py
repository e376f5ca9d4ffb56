# FILE: teams_core/validation.py
from __future__ import annotations
from typing import List, Optional, Sequence
import pandas as pd

from .constants import POSITIONS, RATING_MAX, RATING_MIN
from .io import ROSTER_COLUMNS
from .models import Player


def validate_roster(df: pd.DataFrame) -> List[str]:
    errs = []
    missing = [c for c in ROSTER_COLUMNS if c not in df.columns]
    if missing:
        errs.append(f"Missing required columns: {missing}")
        return errs

    ids = df["player_id"].astype(str)
    if ids.duplicated().any():
        dupes = ids[ids.duplicated()].tolist()
        errs.append(f"Duplicate player_id detected: {', '.join(dupes)}")

    blank = df[df["name"].fillna("").astype(str).str.strip() == ""]
    if not blank.empty:
        rows = ", ".join(str(i + 2) for i in blank.index.tolist())
        errs.append(f"Missing name at rows: {rows}")

    bad_pos = df[~df["position"].isin(POSITIONS)]
    if not bad_pos.empty:
        rows = ", ".join(str(i + 2) for i in bad_pos.index.tolist())
        errs.append(f"Invalid position at rows: {rows}")

    ratings = pd.to_numeric(df["rating"], errors="coerce")
    bad_rating = df[ratings.isna() | (ratings < RATING_MIN) | (ratings > RATING_MAX)]
    if not bad_rating.empty:
        rows = ", ".join(str(i + 2) for i in bad_rating.index.tolist())
        errs.append(f"Rating outside {RATING_MIN:g}-{RATING_MAX:g} at rows: {rows}")

    return errs


def check_selection(selected: Sequence[Player], teams_count: int, per_team: int) -> Optional[str]:
    """
    None when the selection can be split into teams, else what's blocking it.
    """
    if teams_count < 1 or per_team < 1:
        return "Choose at least one team and one player per team."
    ids = [p.id for p in selected]
    if len(set(ids)) != len(ids):
        return "The same player is selected twice."
    needed = teams_count * per_team
    if len(selected) < needed:
        return f"Select {needed - len(selected)} more player(s) ({len(selected)}/{needed})."
    if len(selected) > needed:
        return f"Too many players selected: remove {len(selected) - needed} ({len(selected)}/{needed})."
    return None


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    import numpy as np
    from .balancer import build_balanced_teams
    from .scoring import score, variance

    results = {"tests": []}
    results["tests"].append(("Population variance", variance([1, 2, 3, 4]) == 1.25))

    players = [Player(id=f"p{r}", name=f"P{r}", rating=r) for r in [9, 8, 7, 6, 5, 4, 3, 2]]
    teams = build_balanced_teams(players, 2, 4, rng=np.random.default_rng(0))
    results["tests"].append(("Every player placed once",
                             sorted(p.id for t in teams for p in t) == sorted(p.id for p in players)))
    results["tests"].append(("Balanced 22/22 split", bool(teams) and score(teams) < 1e-6))
    results["tests"].append(("Size mismatch rejected", build_balanced_teams(players[:7], 2, 4) == []))
    return results
