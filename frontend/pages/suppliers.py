# frontend/pages/suppliers.py
from mfg_ui.entities import SUPPLIERS
from mfg_ui.views import render_entity_page

render_entity_page(SUPPLIERS)
