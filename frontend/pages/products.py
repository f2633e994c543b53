# frontend/pages/products.py
from mfg_ui.entities import PRODUCTS
from mfg_ui.views import render_entity_page

render_entity_page(PRODUCTS)
