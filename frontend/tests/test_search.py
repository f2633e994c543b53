from mfg_ui.entities import EMPLOYEES
from mfg_ui.entity import Column, search_rows

ROWS = [
    {"id": 1, "name": "John Smith", "position": "Line Supervisor", "department": "Production", "email": "jsmith@example.com"},
    {"id": 2, "name": "Sarah Johnson", "position": "QA Engineer", "department": "Quality Assurance", "email": None},
    {"id": 3, "name": "Michael Brown", "position": "Technician", "department": "Production", "email": "mbrown@example.com"},
]


def test_empty_query_returns_everything():
    assert search_rows(ROWS, EMPLOYEES.columns, "") == ROWS
    assert search_rows(ROWS, EMPLOYEES.columns, None) == ROWS


def test_case_insensitive_any_column():
    assert [r["id"] for r in search_rows(ROWS, EMPLOYEES.columns, "PRODUCTION")] == [1, 3]
    assert [r["id"] for r in search_rows(ROWS, EMPLOYEES.columns, "qa eng")] == [2]


def test_only_displayed_columns_are_searched():
    cols = (Column("name", "Name"),)
    assert search_rows(ROWS, cols, "technician") == []


def test_no_match():
    assert search_rows(ROWS, EMPLOYEES.columns, "xyz-not-present") == []


def test_query_is_not_trimmed():
    assert search_rows(ROWS, EMPLOYEES.columns, " smith") == [ROWS[0]]
    assert search_rows(ROWS, EMPLOYEES.columns, "smith ") == []
