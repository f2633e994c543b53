# frontend/Home.py
import logging

import streamlit as st
from dotenv import load_dotenv

from mfg_ui.routes import ROUTES

load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
st.set_page_config(page_title="Manufacturing Admin", page_icon="🏭", layout="wide")


def _page(route):
    return st.Page(route.script, title=route.title, icon=route.icon or None,
                   url_path=route.url_path or None, default=(route.path == "/"))


PAGES = {r.path: _page(r) for r in ROUTES}

# unknown paths: Streamlit shows its "page not found" notice and runs the default page
pg = st.navigation(list(PAGES.values()), position="hidden")

# --------- Sidebar ---------
with st.sidebar:
    st.title("🏭 Manufacturing Admin")
    for r in ROUTES:
        if r.path == "/logout":
            st.divider()
        st.page_link(PAGES[r.path], label=r.title, icon=r.icon or None)

pg.run()
