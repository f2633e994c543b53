# frontend/pages/employees.py
from mfg_ui.entities import EMPLOYEES
from mfg_ui.views import render_entity_page

render_entity_page(EMPLOYEES)
