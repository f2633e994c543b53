# frontend/pages/defects.py
import streamlit as st

from mfg_ui.entities import DEFECT_SEVERITIES, DEFECTS
from mfg_ui.views import render_entity_page


def _severity_summary(screen):
    if not screen.rows:
        return
    cols = st.columns(len(DEFECT_SEVERITIES))
    for col, sev in zip(cols, DEFECT_SEVERITIES):
        n = sum(1 for r in screen.rows if r.get("severity") == sev and r.get("status") not in ("Resolved", "Closed"))
        col.metric(f"Open · {sev}", n)


render_entity_page(DEFECTS, below_table=_severity_summary)
