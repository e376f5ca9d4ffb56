# FILE: tests/conftest.py
import pytest
from teams_core.models import Player


def make_players(ratings, gk_idx=(), prefix="p"):
    return [
        Player(id=f"{prefix}{i}", name=f"{prefix.upper()}{i}", rating=r,
               position="GK" if i in gk_idx else "MID", is_gk=i in gk_idx)
        for i, r in enumerate(ratings)
    ]


@pytest.fixture
def eight_players():
    return make_players([9, 8, 7, 6, 5, 4, 3, 2])
