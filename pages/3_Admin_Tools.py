# FILE: pages/3_Admin_Tools.py
import streamlit as st
from teams_core.validation import run_self_test

st.title("3. Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for name, ok in results["tests"]:
        (st.success if ok else st.error)(f"{'PASS' if ok else 'FAIL'} · {name}")

st.write("Use this page for diagnostics.")
