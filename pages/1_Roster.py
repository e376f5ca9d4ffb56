# FILE: pages/1_Roster.py
import io
import streamlit as st
import pandas as pd
from teams_core.aliases import map_headers
from teams_core.io import load_roster_csv, save_roster_csv_bytes, ROSTER_COLUMNS
from teams_core.constants import POSITIONS, RATING_MIN, RATING_MAX, RATING_STEP
from teams_core.validation import validate_roster

st.title("1. Roster: Import & Manage")
st.write("Upload a CSV file with your squad, or edit the saved squad below.")

uploaded_file = st.file_uploader("Upload roster CSV", type=["csv"])
if uploaded_file:
    raw = uploaded_file.getvalue()
    try:
        _, mapping = map_headers(pd.read_csv(io.BytesIO(raw), nrows=0))
        mapping_report = ", ".join(f"{col}→{new}" for col, new in mapping.items() if new)
        st.session_state.roster_df = load_roster_csv(raw)
        st.success(f"Header mapping: {mapping_report}")
    except (ValueError, pd.errors.ParserError) as e:
        st.error(f"Error loading CSV: {e}")

if "roster_df" not in st.session_state:
    st.write("No roster loaded. Open the main page once to load the saved squad, or upload a CSV.")
    st.stop()

edited = st.data_editor(
    st.session_state.roster_df[ROSTER_COLUMNS],
    num_rows="dynamic",
    use_container_width=True,
    column_config={
        "rating": st.column_config.NumberColumn("rating", min_value=RATING_MIN, max_value=RATING_MAX, step=RATING_STEP),
        "position": st.column_config.SelectboxColumn("position", options=POSITIONS, width="small"),
        "is_gk": st.column_config.CheckboxColumn("is_gk"),
        "can_play_gk": st.column_config.CheckboxColumn("can_play_gk"),
    },
)

errors = validate_roster(edited)
if errors:
    st.error("Validation errors:")
    for e in errors:
        st.write("•", e)
else:
    st.session_state.roster_df = edited
    st.success("Roster looks valid ✅")

st.download_button("Download roster CSV", data=save_roster_csv_bytes(edited), file_name="roster.csv", mime="text/csv")
