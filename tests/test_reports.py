# FILE: tests/test_reports.py
from conftest import make_players
from teams_core.reports import teams_summary_df, teams_grid_df
from teams_core.export_pdf import render_pdf

def _teams():
    a = make_players([8, 5, 6], gk_idx=(1,), prefix="a")
    b = make_players([7, 6, 6.5], prefix="b")
    return [a, b]

def test_summary():
    df = teams_summary_df(_teams(), bib_idx=0)
    assert df["team"].tolist() == ["🎽 Team 1", "Team 2"]
    assert df["average"].tolist() == [6.33, 6.5]
    assert df["total"].tolist() == [19.0, 19.5]
    assert df["goalkeepers"].tolist() == [1, 0]

def test_grid_lists_keeper_first():
    grid = teams_grid_df(_teams())
    assert list(grid.columns) == ["Team 1", "Team 2"]
    assert grid["Team 1"].iloc[0] == "A1 (GK)"
    assert grid["Team 2"].iloc[0] == "B0 [MID]"
    assert teams_grid_df([]).empty

def test_render_pdf():
    pdf = render_pdf(_teams(), bib_idx=1)
    assert pdf.startswith(b"%PDF")
