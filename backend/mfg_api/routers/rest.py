# mfg_api/routers/rest.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..core.api import ok, list_meta
from ..core.db import get_db
from ..core.security import require_api_key
from ..domain.tables import get_table
from ..services.row_service import count_rows, delete_row, insert_row, list_rows, update_row

router = APIRouter(prefix="/rest", tags=["rest"], dependencies=[Depends(require_api_key)])


def _validate(schema, payload: Dict[str, Any], *, partial: bool) -> Dict[str, Any]:
    try:
        model = schema.model_validate(payload)
    except ValidationError as e:
        msgs = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise HTTPException(status_code=422, detail=f"Validation error: {msgs}")
    return model.model_dump(exclude_unset=partial)


@router.get("/{table}")
def list_table(
    table: str,
    order: str = Query("id", description="Column to order by; '-' prefix for descending"),
    db: Session = Depends(get_db),
):
    tdef = get_table(table)
    rows = list_rows(db, tdef, order=order)
    return ok(rows, meta=list_meta(rows))


@router.get("/{table}/count")
def count_table(table: str, db: Session = Depends(get_db)):
    tdef = get_table(table)
    return ok({"count": count_rows(db, tdef)})


@router.post("/{table}", status_code=201)
def insert_into_table(table: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    tdef = get_table(table)
    values = _validate(tdef.create, payload, partial=False)
    return ok(insert_row(db, tdef, values), status_code=201)


@router.patch("/{table}/{row_id}")
def update_table_row(
    table: str,
    row_id: int = Path(..., ge=1),
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    tdef = get_table(table)
    patch = _validate(tdef.update, payload, partial=True)
    return ok(update_row(db, tdef, row_id, patch))


@router.delete("/{table}/{row_id}")
def delete_table_row(table: str, row_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    tdef = get_table(table)
    return ok(delete_row(db, tdef, row_id))
