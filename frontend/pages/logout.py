# frontend/pages/logout.py
import streamlit as st

from mfg_ui.views import CTX_KEY

ctx = st.session_state.get(CTX_KEY)
if ctx is not None:
    ctx.reset()
st.session_state.pop(CTX_KEY, None)
st.session_state.pop("profile", None)

st.title("Logged out")
st.write("Your session has been cleared.")
st.page_link("pages/dashboard.py", label="Return to Dashboard", icon="🏠")
