# FILE: tests/test_scoring.py
from teams_core.models import Player
from teams_core.scoring import mean, variance, team_strength, score

def _p(pid, rating):
    return Player(id=pid, name=pid.upper(), rating=rating)

def test_mean_and_variance_empty():
    assert mean([]) == 0
    assert variance([]) == 0
    assert team_strength([]) == 0

def test_population_variance():
    # divides by n, not n-1
    assert variance([1, 2, 3, 4]) == 1.25
    assert variance([5, 5, 5]) == 0

def test_score_is_variance_of_team_means():
    teams = [[_p("a", 9), _p("b", 1)], [_p("c", 4), _p("d", 4)]]
    assert team_strength(teams[0]) == 5
    assert score(teams) == variance([5, 4])
