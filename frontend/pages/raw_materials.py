# frontend/pages/raw_materials.py
from mfg_ui.entities import RAW_MATERIALS
from mfg_ui.views import render_entity_page

render_entity_page(RAW_MATERIALS)
