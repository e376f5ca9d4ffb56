# teams_core/share.py
from __future__ import annotations
from typing import List, Optional, Sequence
from urllib.parse import quote
import numpy as np

from .models import Player

BIB = "🎽"
WHATSAPP_URL = "https://wa.me/?text="


def generate_share_message(teams: Sequence[Sequence[Player]], bib_idx: Optional[int] = None) -> str:
    lines: List[str] = []
    for i, team in enumerate(teams):
        prefix = f"{BIB} " if bib_idx == i else ""
        lines.append(f"{prefix}*Team {i + 1}*")
        for p in team:
            # only dedicated keepers are tagged in the shared text
            lines.append(f"- {p.name} (GK)" if p.is_gk else f"- {p.name}")
        lines.append("")
    return "\n".join(lines).strip()


def whatsapp_url(message: str) -> str:
    return WHATSAPP_URL + quote(message, safe="!*'()")


def pick_bib_team(teams_count: int, rng: np.random.Generator) -> Optional[int]:
    """Random team to wear bibs; None when there are no teams."""
    if teams_count < 1:
        return None
    return int(rng.integers(teams_count))
