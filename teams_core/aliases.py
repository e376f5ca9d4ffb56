# FILE: teams_core/aliases.py
ALIASES = {
    "player_id": ["player_id", "id", "Player ID"],
    "name": ["Name", "Player", "Full Name"],
    "rating": ["Rating", "Score", "Skill", "Level"],
    "position": ["Position", "Pos", "Preferred Position", "Role"],
    "is_gk": ["is_gk", "GK", "Goalkeeper", "Real GK", "realGK", "Keeper"],
    "can_play_gk": ["can_play_gk", "Can Play GK", "canPlayGK", "Can Cover GK", "Backup GK"],
}

def map_headers(df):
    """
    Map input DataFrame columns to expected canonical names using aliases.
    Returns (renamed_df, mapping_report).
    """
    mapping = {}
    rename_cols = {}
    for col in df.columns:
        matched = False
        key = str(col).strip().lower()
        for canon, aliases in ALIASES.items():
            if key == canon.lower() or key in [alias.lower() for alias in aliases]:
                rename_cols[col] = canon
                mapping[col] = canon
                matched = True
                break
        if not matched:
            mapping[col] = None
    df = df.rename(columns=rename_cols)
    return df, mapping
