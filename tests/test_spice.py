# FILE: tests/test_spice.py
import numpy as np
from conftest import make_players
from teams_core.refiner import hill_climb
from teams_core.scoring import score
from teams_core.spice import spice, bottom_indices

def test_bottom_indices_takes_weakest():
    team = make_players([9, 2, 7, 3, 5])
    assert bottom_indices(team, 0.35) == [1, 3]
    assert bottom_indices(team, 0.01) == [1]
    assert bottom_indices([], 0.5) == []

def test_spice_keeps_partition_complete():
    players = make_players([9, 8.5, 7, 6, 6, 5.5, 4, 3, 7.5, 6.5, 5, 4.5])
    base = hill_climb([players[0:4], players[4:8], players[8:12]], 4)
    out = spice(base, np.random.default_rng(11), fraction=0.5, tries=50)
    assert sorted(p.id for t in out for p in t) == sorted(p.id for p in players)
    assert [len(t) for t in out] == [4, 4, 4]

def test_spice_output_within_tolerance_of_input():
    for seed in range(40):
        rng = np.random.default_rng(seed)
        ratings = np.round(rng.uniform(1, 10, size=20), 2).tolist()
        players = make_players(ratings)
        base = hill_climb([players[k:k + 5] for k in range(0, 20, 5)], 5)
        s0 = score(base)
        out = spice(base, rng)
        assert score(out) <= s0 + s0 * 0.03 + 1e-4 + 1e-12

def test_spice_many_tries_do_not_drift():
    players = make_players([9, 8, 7, 6, 5, 4, 3, 2])
    base = [players[:4], players[4:]]
    s0 = score(base)
    for seed in range(10):
        out = spice(base, np.random.default_rng(seed), fraction=1.0, tries=200,
                    tolerance=0.03, base_epsilon=1e-3)
        assert score(out) <= s0 + s0 * 0.03 + 1e-3 + 1e-12

def test_spice_keeps_sole_keepers():
    players = make_players([2, 9, 8, 7, 3, 6, 5, 4], gk_idx=(0, 4))
    teams = [players[:4], players[4:]]
    out = spice(teams, np.random.default_rng(4), fraction=1.0, tries=100, tolerance=10.0, base_epsilon=10.0)
    assert [sum(p.is_gk for p in t) for t in out] == [1, 1]

def test_spice_single_team_noop():
    team = make_players([5, 6, 7])
    out = spice([team], np.random.default_rng(0))
    assert [p.id for p in out[0]] == [p.id for p in team]
