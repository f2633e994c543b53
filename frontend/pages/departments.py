# frontend/pages/departments.py
from mfg_ui.entities import DEPARTMENTS
from mfg_ui.views import render_entity_page

render_entity_page(DEPARTMENTS)
