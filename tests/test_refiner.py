# FILE: tests/test_refiner.py
import numpy as np
import pytest
from conftest import make_players
from teams_core.refiner import hill_climb, swap_allowed
from teams_core.scoring import score
from teams_core.seeder import greedy_seed

def test_hill_climb_never_worsens(eight_players):
    for seed in range(10):
        seeded = greedy_seed(eight_players, 2, 4, np.random.default_rng(seed))
        refined = hill_climb(seeded, 4)
        assert score(refined) <= score(seeded)
        assert [len(t) for t in refined] == [4, 4]

def test_hill_climb_finds_even_split():
    players = make_players([9, 8, 7, 6, 5, 4, 3, 2])
    # worst possible start: strong vs weak
    refined = hill_climb([players[:4], players[4:]], 4)
    assert score(refined) < 1e-9

def test_hill_climb_does_not_mutate_input(eight_players):
    start = [eight_players[:4], eight_players[4:]]
    before = [[p.id for p in t] for t in start]
    hill_climb(start, 4)
    assert [[p.id for p in t] for t in start] == before

def test_swap_allowed_keeper_rule():
    a = make_players([8, 5], gk_idx=(0,), prefix="a")
    b = make_players([6, 4], prefix="b")
    assert not swap_allowed(a, 0, b, 0)   # a would lose its only keeper
    assert swap_allowed(a, 1, b, 0)
    b_gk = make_players([6, 4], gk_idx=(0,), prefix="b")
    assert not swap_allowed(a, 0, b_gk, 0)  # each side would lose its only keeper
    two_gk = make_players([8, 7], gk_idx=(0, 1), prefix="c")
    assert swap_allowed(two_gk, 0, b, 1)

def test_keepers_stay_put_when_only_one_each():
    players = make_players([9, 2, 3, 4, 8, 7, 6, 5], gk_idx=(0, 4))
    start = [players[:4], players[4:]]
    refined = hill_climb(start, 4)
    assert [sum(p.is_gk for p in t) for t in refined] == [1, 1]

def test_hill_climb_rejects_wrong_team_size(eight_players):
    with pytest.raises(ValueError, match="per_team"):
        hill_climb([eight_players[:3], eight_players[3:]], 4)
