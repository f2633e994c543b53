# frontend/pages/material_mapping.py
import pandas as pd
import streamlit as st

from mfg_ui.entities import MATERIAL_MAPPINGS
from mfg_ui.mapping import DEFAULT_UNITS, UNIT_COSTS, calculate_cost
from mfg_ui.views import render_entity_page


def _price_list(screen):
    st.divider()
    left, right = st.columns([3, 2])
    with left:
        st.subheader("Unit Prices")
        df = pd.DataFrame(
            [{"Material": m, "Unit": DEFAULT_UNITS.get(m, ""), "Unit Price": f"${p}"} for m, p in UNIT_COSTS.items()]
        )
        st.dataframe(df, use_container_width=True, hide_index=True)
    with right:
        st.subheader("Cost Preview")
        material = st.selectbox("Material", list(UNIT_COSTS), key="preview_material")
        qty = st.number_input(f"Quantity ({DEFAULT_UNITS.get(material, '')})", min_value=0.0, step=0.5, key="preview_qty")
        st.metric("Cost", calculate_cost(material, qty))


render_entity_page(MATERIAL_MAPPINGS, below_table=_price_list)
