# frontend/pages/analytics.py
import streamlit as st

from mfg_ui import analytics as an
from mfg_ui.views import flush_notices, require_context

ctx = require_context()
ctx.deactivate()

st.title("Analytics")
st.caption("Production and quality metrics")


def _csv(df):
    return df.to_csv(index=False).encode("utf-8")


# --------- KPIs ---------
cols = st.columns(len(an.KPIS))
for col, kpi in zip(cols, an.KPIS):
    col.metric(kpi["label"], kpi["value"], kpi["delta"],
               delta_color="inverse" if kpi.get("inverse") else "normal")

st.divider()

# ===== Production vs target =====
st.subheader("Production vs Target")
df_prod = an.frame(an.PRODUCTION)
if df_prod.empty:
    st.plotly_chart(an.empty_figure(360), use_container_width=True, key="chart_prod")
else:
    st.plotly_chart(an.production_figure(df_prod, 360), use_container_width=True, key="chart_prod")
    st.download_button("Download CSV: Production", _csv(df_prod), "production.csv", "text/csv", key="dl_prod")

c1, c2 = st.columns(2)

# ===== Defect categories =====
with c1:
    st.subheader("Defect Categories")
    df_def = an.frame(an.DEFECT_CATEGORIES)
    if df_def.empty:
        st.plotly_chart(an.empty_figure(), use_container_width=True, key="chart_def")
    else:
        st.plotly_chart(an.share_figure(df_def, "category"), use_container_width=True, key="chart_def")
        st.download_button("Download CSV: Defects", _csv(df_def), "defect_categories.csv", "text/csv", key="dl_def")

# ===== Material distribution =====
with c2:
    st.subheader("Material Usage Distribution")
    df_mat = an.frame(an.MATERIAL_DISTRIBUTION)
    if df_mat.empty:
        st.plotly_chart(an.empty_figure(), use_container_width=True, key="chart_mat")
    else:
        st.plotly_chart(an.share_figure(df_mat, "material"), use_container_width=True, key="chart_mat")
        st.download_button("Download CSV: Materials", _csv(df_mat), "material_distribution.csv", "text/csv", key="dl_mat")

# ===== Department productivity =====
st.subheader("Department Productivity")
df_dep = an.frame(an.DEPARTMENT_PRODUCTIVITY)
if df_dep.empty:
    st.plotly_chart(an.empty_figure(), use_container_width=True, key="chart_dep")
else:
    st.plotly_chart(an.productivity_figure(df_dep), use_container_width=True, key="chart_dep")
    st.dataframe(df_dep, use_container_width=True, hide_index=True)

flush_notices(ctx)
