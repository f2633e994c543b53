# frontend/pages/dashboard.py
import altair as alt
import pandas as pd
import streamlit as st

from mfg_ui.entities import ALL_SPECS
from mfg_ui.routes import route_for_table
from mfg_ui.views import flush_notices, require_context

ctx = require_context()
ctx.deactivate()

head, btn = st.columns([5, 1])
with head:
    st.title("Dashboard")
    st.caption("Overview of your manufacturing operations")
if btn.button("🔄 Refresh", key="btn_dash_refresh"):
    ctx.cache.clear()

counts = ctx.counts([s.table for s in ALL_SPECS])

# --------- Stat cards ---------
per_row = 4
for start in range(0, len(ALL_SPECS), per_row):
    cols = st.columns(per_row)
    for col, spec in zip(cols, ALL_SPECS[start:start + per_row]):
        n = counts.get(spec.table)
        with col.container(border=True):
            st.metric(spec.title, "—" if n is None else n)
            route = route_for_table(spec.table)
            if route is not None:
                st.page_link(route.script, label=f"Manage {spec.title.lower()}", icon=route.icon or None)

st.divider()

# --------- Records per table ---------
st.subheader("Records per Table")
df = pd.DataFrame(
    [{"table": s.title, "records": counts[s.table]} for s in ALL_SPECS if counts.get(s.table) is not None]
)
if df.empty:
    st.info("Record counts are not available right now.")
else:
    chart = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("records:Q", title="Records"),
            y=alt.Y("table:N", sort="-x", title="Table"),
            tooltip=["table", "records"],
        )
    )
    st.altair_chart(chart, use_container_width=True)

flush_notices(ctx)
