# teams_core/config.py
from __future__ import annotations
import os
import textwrap

from .constants import (
    REFINE_MAX_ITER, MIN_RUNS, MAX_RUNS,
    SPICE_FRACTION, SPICE_TRIES, SPICE_TOLERANCE, SPICE_BASE_EPSILON,
)

ASSETS_DIR = "assets"
SAMPLE_ROSTER_PATH = os.path.join(ASSETS_DIR, "sample_roster.csv")
SETTINGS_PATH = os.path.join(ASSETS_DIR, "settings.yaml")

# ===== Optimizer defaults =====
DEFAULT_CONFIG = {
    "refine_max_iter": REFINE_MAX_ITER,
    "spice_enabled": True,
    "spice_fraction": SPICE_FRACTION,        # bottom share of each team eligible for spice swaps
    "spice_tries": SPICE_TRIES,
    "spice_tolerance": SPICE_TOLERANCE,      # accept up to +3% variance
    "spice_base_epsilon": SPICE_BASE_EPSILON,
    "min_runs": MIN_RUNS,
    "max_runs": MAX_RUNS,
    "random_seed": None,
}

def ensure_assets_exist(base_dir: str = "."):
    os.makedirs(os.path.join(base_dir, ASSETS_DIR), exist_ok=True)
    settings = os.path.join(base_dir, SETTINGS_PATH)
    if not os.path.exists(settings):
        with open(settings, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SETTINGS_YAML)
    roster = os.path.join(base_dir, SAMPLE_ROSTER_PATH)
    if not os.path.exists(roster):
        with open(roster, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_ROSTER_CSV)

# ===== Default settings file =====
DEFAULT_SETTINGS_YAML = textwrap.dedent("""\
optimizer:
  refine_max_iter: 300
  spice_enabled: true
  spice_fraction: 0.35
  spice_tries: 20
  spice_tolerance: 0.03
  spice_base_epsilon: 0.0001
  min_runs: 10
  max_runs: 60
  random_seed: null
""")

# ===== Saved squad =====
DEFAULT_SAMPLE_ROSTER_CSV = textwrap.dedent("""\
player_id,name,rating,position,is_gk,can_play_gk
ed,Ed,8,GK,true,false
ant,Ant,7,ATT,false,true
stokes,Stokes,5.5,DEF,false,true
jburke,J Burke,5,DEF,false,true
bell,Bell,8,MID,false,false
ky,Ky,9,MID,false,false
jonc,Jon C,7,DEF,false,false
jord,Jord,9,DEF,false,false
callum,Callum,7,DEF,false,false
ob,OB,7,MID,false,false
matts,Matts,7,MID,false,false
kie,Kie,7,DEF,false,true
cob,Cob,7,MID,false,false
mitch,Mitch,6.5,MID,false,false
owen,Owen,9,MID,false,false
hannon,Hannon,6.5,MID,false,false
mattfield,Matt Field,6,ATT,false,false
kdon,K-Don,5.5,MID,false,false
smithy,Smithy,6,ATT,false,false
beaver,Beaver,7,DEF,false,false
tomburke,Tom Burke,7,MID,false,false
tomharris,Tom Harris,7,MID,false,false
graham,Graham,6,DEF,false,false
ize,Ize,7,MID,false,false
belcher,Belcher,5,MID,false,false
mattyd,Matty D,7,MID,false,false
salter,Salter,4,DEF,false,false
hextell,Hextell,8,MID,false,false
""")

# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap" rel="stylesheet">
<style>
:root{
  --ink:#171717; --sub:#525252; --line:#000000;
  --accent:#326295; --accent-dark:#2b567e;
  --radius:24px;
}
body, .stApp, .block-container {
  font-family: Inter, system-ui, Segoe UI, Roboto, Helvetica, Arial, sans-serif; color: var(--ink);
}
.block-container { padding-top: 1rem; max-width: 960px; }

.card{
  background:#ffffff; border:1px solid var(--line);
  border-radius:var(--radius); box-shadow:0 12px 30px rgba(0,0,0,.12);
}
.section{padding:20px}
.small{color:var(--sub);font-size:13px}

.stButton > button, .stDownloadButton > button, .stLinkButton > a {
  border:1px solid var(--line); border-radius:6px; height:2.25rem;
}
.stButton > button[kind="primary"] {
  background: var(--accent); border-color: var(--accent); color:#ffffff;
}
.stButton > button[kind="primary"]:hover { background: var(--accent-dark); }

.tag{
  border-radius:999px; background:#f5f5f5; padding:1px 8px; font-size:10px;
  text-transform:uppercase; letter-spacing:.04em; border:1px solid var(--line);
}
.metric{ border:1px solid var(--line); border-radius:6px; padding:10px; }
.metric .label{ color:#a3a3a3; font-size:12px; }
.metric .value{ font-size:18px; font-weight:600; }
</style>
"""
