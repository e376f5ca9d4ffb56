# FILE: tests/test_constants.py
from teams_core.constants import players_per_team, FORMATS

def test_players_per_team_fixed_formats():
    assert [players_per_team(i, None) for i in range(4)] == [5, 7, 8, 11]

def test_players_per_team_custom():
    custom = len(FORMATS) - 1
    assert players_per_team(custom, 9) == 9
    assert players_per_team(custom, 2) == 3
    assert players_per_team(custom, 6.7) == 6
    assert players_per_team(custom, None) == 7
