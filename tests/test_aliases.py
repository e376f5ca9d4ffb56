# FILE: tests/test_aliases.py
import pandas as pd
from teams_core.aliases import map_headers

def test_map_headers_basic():
    df = pd.DataFrame(columns=["Name", "Skill", "Pos", "Goalkeeper", "Can Play GK", "Unknown"])
    mapped_df, mapping = map_headers(df)
    assert mapping["Name"] == "name"
    assert mapping["Skill"] == "rating"
    assert mapping["Pos"] == "position"
    assert mapping["Goalkeeper"] == "is_gk"
    assert mapping["Can Play GK"] == "can_play_gk"
    assert mapping["Unknown"] is None
    assert list(mapped_df.columns) == ["name", "rating", "position", "is_gk", "can_play_gk", "Unknown"]
