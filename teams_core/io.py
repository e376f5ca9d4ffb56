# teams_core/io.py
from __future__ import annotations
import io
from typing import Iterable, List
import yaml
import pandas as pd

from .aliases import map_headers
from .constants import DEFAULT_RATING, POSITIONS
from .models import OptimizerConfig, Player
from .ratings import id_of, normalize_rating

REQUIRED_COLUMNS = ["name", "rating"]
ROSTER_COLUMNS = ["player_id", "name", "rating", "position", "is_gk", "can_play_gk"]

_TRUE_TOKENS = {"true", "yes", "y", "1", "x"}


def _as_bool(v) -> bool:
    if isinstance(v, bool):
        return v
    if v is None or (isinstance(v, float) and pd.isna(v)):
        return False
    return str(v).strip().lower() in _TRUE_TOKENS


def _as_position(v) -> str:
    s = "" if v is None or (isinstance(v, float) and pd.isna(v)) else str(v).strip()
    for pos in POSITIONS:
        if s.lower() == pos.lower():
            return pos
    return "Any"


def load_roster_csv(file_like) -> pd.DataFrame:
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    # every cell is read as text; ratings and flags are converted below
    df = pd.read_csv(file_like, dtype=str)
    df, _ = map_headers(df)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df["rating"] = df["rating"].map(normalize_rating)
    if "position" not in df.columns:
        df["position"] = "Any"
    df["position"] = df["position"].map(_as_position)
    for c in ["is_gk", "can_play_gk"]:
        if c not in df.columns:
            df[c] = False
        df[c] = df[c].map(_as_bool)
    # a listed keeper is a dedicated keeper
    df["is_gk"] = df["is_gk"] | (df["position"] == "GK")

    if "player_id" not in df.columns:
        df["player_id"] = df["name"].map(id_of)
    else:
        ids = df["player_id"].fillna("").astype(str).str.strip()
        df["player_id"] = ids.where(ids != "", df["name"].map(id_of))
    return df[ROSTER_COLUMNS + [c for c in df.columns if c not in ROSTER_COLUMNS]]


def players_from_df(df: pd.DataFrame) -> List[Player]:
    return [
        Player(
            id=str(r["player_id"]),
            name=str(r["name"]),
            rating=float(r["rating"]),
            position=_as_position(r["position"]),
            is_gk=_as_bool(r["is_gk"]),
            can_play_gk=_as_bool(r["can_play_gk"]),
        )
        for _, r in df.iterrows()
    ]


def players_to_df(players: Iterable[Player]) -> pd.DataFrame:
    rows = [
        {
            "player_id": p.id,
            "name": p.name,
            "rating": p.rating,
            "position": p.position,
            "is_gk": p.is_gk,
            "can_play_gk": p.can_play_gk,
        }
        for p in players
    ]
    return pd.DataFrame(rows, columns=ROSTER_COLUMNS)


def save_roster_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_template_csv_bytes() -> bytes:
    empty = pd.DataFrame(columns=ROSTER_COLUMNS)
    buf = io.StringIO()
    empty.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def make_manual_player(name: str, rating=DEFAULT_RATING, position: str = "DEF") -> Player:
    name = (name or "").strip()
    if not name:
        raise ValueError("Player name is required.")
    pos = _as_position(position)
    return Player(
        id=id_of(name),
        name=name,
        rating=normalize_rating(rating),
        position=pos,
        is_gk=pos == "GK",
        can_play_gk=False,
    )


def merge_players(saved: Iterable[Player], extra: Iterable[Player]) -> List[Player]:
    """Saved roster plus manual entries; a manual entry replaces a saved player with the same id."""
    merged = {p.id: p for p in saved}
    for p in extra:
        merged[p.id] = p
    return list(merged.values())


def load_settings_yaml(path: str) -> OptimizerConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return OptimizerConfig()
    if not isinstance(obj, dict):
        raise ValueError(f"Settings file {path} must contain a mapping.")
    return OptimizerConfig(**obj.get("optimizer", obj))


def save_settings_yaml(path: str, config: OptimizerConfig):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"optimizer": config.model_dump()}, f, sort_keys=False)
