# app.py
import logging
from typing import List

import numpy as np
import streamlit as st

from teams_core.config import (
    DEFAULT_CONFIG,
    SAMPLE_ROSTER_PATH,
    SETTINGS_PATH,
    ensure_assets_exist,
    ui_css,
)
from teams_core.constants import (
    FORMATS,
    DEFAULT_FORMAT_IDX,
    CUSTOM_SIZE_MIN,
    CUSTOM_SIZE_DEFAULT,
    TEAM_COUNT_CHOICES,
    PICKER_TABS,
    DEFAULT_RATING,
    RATING_MIN,
    RATING_MAX,
    RATING_STEP,
    players_per_team,
)
from teams_core.io import (
    load_roster_csv,
    players_from_df,
    generate_template_csv_bytes,
    load_settings_yaml,
    make_manual_player,
    merge_players,
)
from teams_core.models import OptimizerConfig, Player
from teams_core.balancer import solve_teams
from teams_core.validation import check_selection
from teams_core.reports import teams_summary_df, teams_grid_df
from teams_core.share import generate_share_message, whatsapp_url, pick_bib_team
from teams_core.export_pdf import render_pdf


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# ---------- Page & Theme ----------
st.set_page_config(page_title="Balanced Teams", layout="centered")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    if "roster_df" not in ss:
        with open(SAMPLE_ROSTER_PATH, "rb") as f:
            ss.roster_df = load_roster_csv(f)
    if "optimizer_config" not in ss:
        cfg = dict(DEFAULT_CONFIG)
        cfg.update(load_settings_yaml(SETTINGS_PATH).model_dump(exclude_unset=True))
        ss.optimizer_config = OptimizerConfig(**cfg)
    ss.setdefault("format_idx", DEFAULT_FORMAT_IDX)
    ss.setdefault("custom_size", CUSTOM_SIZE_DEFAULT)
    ss.setdefault("num_teams", TEAM_COUNT_CHOICES[0])
    ss.setdefault("setup_confirmed", False)
    ss.setdefault("selected", [])          # List[Player], in pick order
    ss.setdefault("extra_players", [])     # manual adds
    ss.setdefault("teams", [])             # List[List[Player]]
    ss.setdefault("team_score", None)
    ss.setdefault("bib_idx", None)
    ss.setdefault("random_seed", 0)
    ss.setdefault("use_seed", False)
    ss.setdefault("share_message", "")

_init_state()
ss = st.session_state


def _rng() -> np.random.Generator:
    if ss.use_seed:
        return np.random.default_rng(int(ss.random_seed))
    return np.random.default_rng(ss.optimizer_config.random_seed)


def _all_players() -> List[Player]:
    return merge_players(players_from_df(ss.roster_df), ss.extra_players)


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Advanced")
    ss.use_seed = st.checkbox("Fixed random seed", value=ss.use_seed,
                              help="Same seed + same players gives the same teams.")
    ss.random_seed = st.number_input("Random seed", min_value=0, max_value=1_000_000,
                                     value=int(ss.random_seed), step=1, disabled=not ss.use_seed)

    cfg = ss.optimizer_config
    refine_max_iter = st.number_input("Swap search iterations", min_value=1, max_value=5000,
                                      value=cfg.refine_max_iter, step=50)
    spice_enabled = st.checkbox("Mix up weaker players (spice)", value=cfg.spice_enabled)
    spice_tries = st.number_input("Spice tries", min_value=0, max_value=200,
                                  value=cfg.spice_tries, step=1, disabled=not spice_enabled)
    spice_tolerance = st.number_input("Spice tolerance", min_value=0.0, max_value=1.0,
                                      value=cfg.spice_tolerance, step=0.01, format="%.2f",
                                      disabled=not spice_enabled,
                                      help="Allowed variance increase, as a fraction of the current variance.")
    c_min, c_max = st.columns(2)
    with c_min:
        min_runs = st.number_input("Min restarts", min_value=1, max_value=500, value=cfg.min_runs, step=1)
    with c_max:
        max_runs = st.number_input("Max restarts", min_value=1, max_value=500, value=cfg.max_runs, step=1)

    try:
        ss.optimizer_config = OptimizerConfig(
            refine_max_iter=int(refine_max_iter),
            spice_enabled=spice_enabled,
            spice_fraction=cfg.spice_fraction,
            spice_tries=int(spice_tries),
            spice_tolerance=float(spice_tolerance),
            spice_base_epsilon=cfg.spice_base_epsilon,
            min_runs=int(min_runs),
            max_runs=int(max_runs),
            random_seed=cfg.random_seed,
        )
    except ValueError as e:
        st.warning(f"Invalid settings kept unchanged: {e}")

    st.divider()
    st.subheader("📄 Files")
    colT, colS = st.columns(2)
    with colT:
        st.download_button(
            "template.csv",
            data=generate_template_csv_bytes(),
            file_name="template.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with colS:
        with open(SAMPLE_ROSTER_PATH, "rb") as f:
            st.download_button(
                "sample_roster.csv",
                data=f.read(),
                file_name="sample_roster.csv",
                mime="text/csv",
                use_container_width=True,
            )


# ---------- Header ----------
st.markdown(
    """
<div class="card section">
  <h2>⚽ Balanced Teams</h2>
  <div class="small">1) Set up the match → 2) Pick who's playing → 3) Generate balanced teams and share them.</div>
</div>
""",
    unsafe_allow_html=True,
)

per_team = players_per_team(ss.format_idx, ss.custom_size)
total_needed = per_team * ss.num_teams


# ============================================================
# STEP 1 — Setup
# ============================================================
st.markdown("### 1 · Setup")
if not ss.setup_confirmed:
    labels = [f["label"] for f in FORMATS]
    ss.format_idx = labels.index(st.radio("Format", labels, index=ss.format_idx, horizontal=True))
    if FORMATS[ss.format_idx]["size"] is None:
        ss.custom_size = st.number_input("Players per team", min_value=CUSTOM_SIZE_MIN, max_value=30,
                                         value=int(ss.custom_size), step=1)
    ss.num_teams = st.radio("Teams", TEAM_COUNT_CHOICES,
                            index=TEAM_COUNT_CHOICES.index(ss.num_teams), horizontal=True)
    per_team = players_per_team(ss.format_idx, ss.custom_size)
    total_needed = per_team * ss.num_teams
    st.caption(f"{ss.num_teams} teams × {per_team} players = {total_needed} players")
    if st.button("Confirm setup", type="primary"):
        ss.setup_confirmed = True
        st.rerun()
else:
    st.write(f"**{FORMATS[ss.format_idx]['label']}** · {ss.num_teams} teams × {per_team} = {total_needed} players")
    if st.button("Change setup"):
        ss.setup_confirmed = False
        ss.teams = []
        ss.bib_idx = None
        st.rerun()

if not ss.setup_confirmed:
    st.stop()


# ============================================================
# STEP 2 — Select players
# ============================================================
st.markdown("### 2 · Select players")
step2_locked = len(ss.teams) > 0
selected_ids = {p.id for p in ss.selected}
remaining = total_needed - len(ss.selected)
available = [p for p in _all_players() if p.id not in selected_ids]

st.progress(min(1.0, len(ss.selected) / total_needed) if total_needed else 0.0,
            text=f"{len(ss.selected)}/{total_needed} selected")

if step2_locked:
    st.info("Selection is locked. Use **Regenerate teams** below to remix, or **Amend players** to edit.")
else:
    search = st.text_input("Search", placeholder="Filter by name").strip().lower()
    tabs = st.tabs([f"{pos} ({sum(1 for p in available if p.position == pos)})" for pos in PICKER_TABS])
    for tab, pos in zip(tabs, PICKER_TABS):
        with tab:
            in_view = [p for p in available if p.position == pos and (not search or search in p.name.lower())]
            if not in_view:
                st.caption("No players here.")
            cols = st.columns(3)
            for k, p in enumerate(in_view):
                label = f"{p.name} · {p.rating:g}" + (" *" if p.can_play_gk and not p.is_gk else "")
                if cols[k % 3].button(label, key=f"add_{p.id}", disabled=remaining <= 0, use_container_width=True):
                    ss.selected = ss.selected + [p]
                    st.rerun()
    unlisted = [p for p in available if p.position not in PICKER_TABS]
    if unlisted:
        st.caption("Other: " + ", ".join(p.name for p in unlisted))

    with st.expander("Add a player manually"):
        m1, m2, m3 = st.columns([2, 1, 1])
        manual_name = m1.text_input("Name", key="manual_name")
        manual_position = m2.selectbox("Position", PICKER_TABS, index=1, key="manual_position")
        manual_rating = m3.number_input("Rating", min_value=RATING_MIN, max_value=RATING_MAX,
                                        value=DEFAULT_RATING, step=RATING_STEP, key="manual_rating")
        if st.button("Add player"):
            try:
                newp = make_manual_player(manual_name, manual_rating, manual_position)
            except ValueError as e:
                st.warning(str(e))
            else:
                ss.extra_players = merge_players(ss.extra_players, [newp])
                if len(ss.selected) < total_needed and newp.id not in selected_ids:
                    ss.selected = ss.selected + [newp]
                st.rerun()

if ss.selected:
    st.markdown("**Selected**")
    cols = st.columns(3)
    for k, p in enumerate(ss.selected):
        tag = "GK" if p.is_gk else p.position
        if cols[k % 3].button(f"✕ {p.name} [{tag}]", key=f"rm_{p.id}", disabled=step2_locked,
                              use_container_width=True):
            ss.selected = [x for x in ss.selected if x.id != p.id]
            st.rerun()

blocker = check_selection(ss.selected, ss.num_teams, per_team)


def _generate():
    result = solve_teams(ss.selected, ss.num_teams, per_team, rng=_rng(), config=ss.optimizer_config)
    if not result.teams:
        st.error(f"Could not build teams: {result.error}")
        return
    ss.teams = result.teams
    ss.team_score = result.score
    if ss.bib_idx is None:
        ss.bib_idx = pick_bib_team(len(result.teams), _rng())
    ss.share_message = generate_share_message(ss.teams, ss.bib_idx)


if not step2_locked:
    g1, g2 = st.columns(2)
    with g1:
        if st.button("Clear selection", use_container_width=True, disabled=not ss.selected):
            ss.selected = []
            st.rerun()
    with g2:
        if st.button("Generate teams", type="primary", use_container_width=True, disabled=blocker is not None):
            _generate()
            st.rerun()
    if blocker:
        st.caption(blocker)


# ============================================================
# STEP 3 — Results
# ============================================================
st.markdown("### 3 · Results")
if not ss.teams:
    st.caption("Generate teams in step 2 to see results here.")
    st.stop()

summary = teams_summary_df(ss.teams, ss.bib_idx)
metric_cols = st.columns(len(ss.teams) + 1)
for col, (_, row) in zip(metric_cols, summary.iterrows()):
    col.metric(f"{row['team']} Avg", f"{row['average']:.2f}")
metric_cols[-1].metric("Variance", f"{ss.team_score:.4f}")

st.dataframe(teams_grid_df(ss.teams, ss.bib_idx), use_container_width=True)
st.caption("(GK) dedicated keeper · * can cover in goal")

a1, a2 = st.columns(2)
with a1:
    if st.button("Amend players", use_container_width=True, help="Unlock step 2 and adjust the selection"):
        ss.teams = []
        ss.team_score = None
        ss.bib_idx = None
        st.rerun()
with a2:
    if st.button("Regenerate teams", type="primary", use_container_width=True,
                 help="Rebuild teams with the same selected players"):
        _generate()
        st.rerun()

st.markdown("#### 📲 WhatsApp message")
st.text_area("Message", value=ss.share_message, height=220, label_visibility="collapsed")
s1, s2 = st.columns(2)
with s1:
    st.link_button("Open WhatsApp", whatsapp_url(ss.share_message), use_container_width=True)
with s2:
    st.download_button(
        "Download PDF",
        data=render_pdf(ss.teams, ss.bib_idx),
        file_name="teams.pdf",
        mime="application/pdf",
        use_container_width=True,
    )

summary_csv = summary.to_csv(index=False).encode("utf-8")
st.download_button("Download summary CSV", data=summary_csv, file_name="teams_summary.csv", mime="text/csv")

if st.button("Reset all"):
    for key in ["selected", "extra_players", "teams", "team_score", "bib_idx", "share_message", "setup_confirmed"]:
        ss.pop(key, None)
    st.rerun()
