# frontend/pages/customers.py
from mfg_ui.entities import CUSTOMERS
from mfg_ui.views import render_entity_page

render_entity_page(CUSTOMERS)
