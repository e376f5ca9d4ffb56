# FILE: tests/test_models.py
import pytest
from pydantic import ValidationError
from teams_core.models import Player, OptimizerConfig

def test_player_is_frozen():
    p = Player(id="ed", name="Ed", rating=8, position="GK", is_gk=True)
    with pytest.raises(ValidationError):
        p.rating = 9

def test_player_rejects_bad_values():
    with pytest.raises(ValidationError):
        Player(id="x", name="X", rating=float("nan"))
    with pytest.raises(ValidationError):
        Player(id="x", name="X", rating=5, position="Striker")

def test_config_runs_ordered():
    with pytest.raises(ValidationError):
        OptimizerConfig(min_runs=20, max_runs=10)
    with pytest.raises(ValidationError):
        OptimizerConfig(spice_fraction=0)
