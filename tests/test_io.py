# FILE: tests/test_io.py
import io
import pytest
from teams_core.config import DEFAULT_SAMPLE_ROSTER_CSV, DEFAULT_SETTINGS_YAML
from teams_core.io import (
    load_roster_csv, players_from_df, players_to_df, save_roster_csv_bytes,
    generate_template_csv_bytes, make_manual_player, merge_players,
    load_settings_yaml, save_settings_yaml, ROSTER_COLUMNS,
)
from teams_core.models import OptimizerConfig

def test_load_sample_roster():
    df = load_roster_csv(io.StringIO(DEFAULT_SAMPLE_ROSTER_CSV))
    assert list(df.columns[:len(ROSTER_COLUMNS)]) == ROSTER_COLUMNS
    players = players_from_df(df)
    assert len(players) == 28
    ed = next(p for p in players if p.name == "Ed")
    assert ed.is_gk and ed.position == "GK" and ed.rating == 8
    ant = next(p for p in players if p.name == "Ant")
    assert ant.can_play_gk and not ant.is_gk

def test_load_aliased_csv_fills_defaults():
    csv = "Player,Skill,Pos\nMatt Field,6.2,att\nSam,11,\nKeeper Kev,7,GK\n"
    df = load_roster_csv(csv.encode("utf-8"))
    assert df["player_id"].tolist() == ["mattfield", "sam", "keeperkev"]
    assert df["rating"].tolist() == [6.0, 10.0, 7.0]
    assert df["position"].tolist() == ["ATT", "Any", "GK"]
    assert df["is_gk"].tolist() == [False, False, True]
    assert df["can_play_gk"].tolist() == [False, False, False]

def test_load_roster_missing_columns():
    with pytest.raises(ValueError, match="rating"):
        load_roster_csv(io.StringIO("name,position\nA,DEF\n"))

def test_players_df_round_trip_columns():
    players = players_from_df(load_roster_csv(io.StringIO(DEFAULT_SAMPLE_ROSTER_CSV)))
    df = players_to_df(players)
    assert list(df.columns) == ROSTER_COLUMNS
    reloaded = players_from_df(load_roster_csv(save_roster_csv_bytes(df)))
    assert reloaded == players

def test_template_has_headers_only():
    text = generate_template_csv_bytes().decode("utf-8").strip()
    assert text == ",".join(ROSTER_COLUMNS)

def test_manual_player():
    p = make_manual_player("  New Guy ", 7.3, "GK")
    assert (p.id, p.name, p.rating, p.is_gk, p.can_play_gk) == ("newguy", "New Guy", 7.5, True, False)
    with pytest.raises(ValueError):
        make_manual_player("   ")

def test_merge_players_replaces_same_id():
    a = make_manual_player("Ed", 8, "GK")
    b = make_manual_player("Bell", 8, "MID")
    ed2 = make_manual_player("Ed", 5, "DEF")
    merged = merge_players([a, b], [ed2])
    assert [p.id for p in merged] == ["ed", "bell"]
    assert merged[0].rating == 5 and not merged[0].is_gk

def test_settings_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(DEFAULT_SETTINGS_YAML, encoding="utf-8")
    assert load_settings_yaml(str(path)).model_dump() == OptimizerConfig().model_dump()
    assert load_settings_yaml(str(tmp_path / "missing.yaml")).model_dump() == OptimizerConfig().model_dump()

    save_settings_yaml(str(path), OptimizerConfig(spice_tries=5, random_seed=3))
    cfg = load_settings_yaml(str(path))
    assert cfg.spice_tries == 5 and cfg.random_seed == 3

    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings_yaml(str(path))

def test_numeric_ids_with_blank_cell_stay_text():
    df = load_roster_csv(b"player_id,name,rating\n1,A,5\n,B,6\n007,C,7\n")
    assert df["player_id"].tolist() == ["1", "b", "007"]
    assert df["rating"].tolist() == [5.0, 6.0, 7.0]

def test_malformed_csv_raises_catchable_error():
    import pandas as pd
    with pytest.raises((ValueError, pd.errors.ParserError)):
        load_roster_csv(b'name,rating\n"Ann,5\n')
    with pytest.raises((ValueError, pd.errors.ParserError)):
        load_roster_csv(b"")
