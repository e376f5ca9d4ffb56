# FILE: pages/2_Share.py
import streamlit as st
from teams_core.share import whatsapp_url

st.title("2. WhatsApp Message")
st.write("Copy the message below, or open it directly in WhatsApp.")

message = st.session_state.get("share_message", "")
if not message:
    st.warning("No teams generated yet. Build teams on the main page first.")
    st.stop()

st.text_area("Message", value=message, height=300)
st.link_button("Open WhatsApp", whatsapp_url(message))
st.download_button("Download as text", data=message.encode("utf-8"), file_name="teams.txt", mime="text/plain")
