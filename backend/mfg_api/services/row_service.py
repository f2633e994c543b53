from __future__ import annotations
import logging
from typing import Any, Dict, List

from fastapi import HTTPException, status
from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from ..domain.constants import EVENT_DELETE, EVENT_INSERT, EVENT_UPDATE, READ_ONLY_COLUMNS
from ..domain.tables import TableDef
from .change_feed import change_log

logger = logging.getLogger(__name__)


def serialize(tdef: TableDef, obj) -> Dict[str, Any]:
    return tdef.read.model_validate(obj).model_dump(mode="json")


def _order_clause(tdef: TableDef, order: str):
    """'name' -> name ASC, '-id' -> id DESC."""
    key = (order or "id").strip()
    direction = desc if key.startswith("-") else asc
    col = key.lstrip("-")
    if col not in tdef.columns:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot order {tdef.name} by '{col}'. Allowed: {', '.join(tdef.columns)}",
        )
    return direction(getattr(tdef.model, col))


def _get_or_404(db: Session, tdef: TableDef, row_id: int):
    obj = db.get(tdef.model, row_id)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"{tdef.name} row {row_id} not found")
    return obj


# -------- Reads --------
def list_rows(db: Session, tdef: TableDef, *, order: str = "id") -> List[Dict[str, Any]]:
    clause = _order_clause(tdef, order)
    # id as tie-breaker so "name" ordering is stable across reloads
    rows = db.execute(select(tdef.model).order_by(clause, tdef.model.id)).scalars().all()
    return [serialize(tdef, r) for r in rows]


def count_rows(db: Session, tdef: TableDef) -> int:
    return int(db.execute(select(func.count()).select_from(tdef.model)).scalar() or 0)


# -------- Writes --------
def insert_row(db: Session, tdef: TableDef, payload: Dict[str, Any]) -> Dict[str, Any]:
    try:
        obj = tdef.model(**{k: v for k, v in payload.items() if k not in READ_ONLY_COLUMNS})
        db.add(obj)
        db.flush()
        db.commit()
        db.refresh(obj)
        data = serialize(tdef, obj)
    except HTTPException:
        db.rollback()
        raise
    except (IntegrityError, DBAPIError) as e:
        db.rollback()
        msg = str(getattr(e, "orig", e))
        raise HTTPException(status_code=400, detail=f"db_error: {msg}")
    except Exception as e:
        db.rollback()
        logger.exception("insert error (table=%s)", tdef.name)
        raise HTTPException(status_code=500, detail=f"insert_error: {e!r}")
    change_log.publish(tdef.name, EVENT_INSERT, data["id"])
    return data


def update_row(db: Session, tdef: TableDef, row_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
    try:
        obj = _get_or_404(db, tdef, row_id)
        for key, value in patch.items():
            if key in READ_ONLY_COLUMNS:
                continue
            setattr(obj, key, value)
        db.flush()
        db.commit()
        db.refresh(obj)
        data = serialize(tdef, obj)
    except HTTPException:
        db.rollback()
        raise
    except (IntegrityError, DBAPIError) as e:
        db.rollback()
        msg = str(getattr(e, "orig", e))
        raise HTTPException(status_code=400, detail=f"db_error: {msg}")
    except Exception as e:
        db.rollback()
        logger.exception("update error (table=%s, id=%s)", tdef.name, row_id)
        raise HTTPException(status_code=500, detail=f"update_error: {e!r}")
    change_log.publish(tdef.name, EVENT_UPDATE, row_id)
    return data


def delete_row(db: Session, tdef: TableDef, row_id: int) -> Dict[str, Any]:
    try:
        obj = _get_or_404(db, tdef, row_id)
        db.delete(obj)
        db.flush()
        db.commit()
    except HTTPException:
        db.rollback()
        raise
    except (IntegrityError, DBAPIError) as e:
        db.rollback()
        msg = str(getattr(e, "orig", e))
        raise HTTPException(status_code=400, detail=f"db_error: {msg}")
    except Exception as e:
        db.rollback()
        logger.exception("delete error (table=%s, id=%s)", tdef.name, row_id)
        raise HTTPException(status_code=500, detail=f"delete_error: {e!r}")
    change_log.publish(tdef.name, EVENT_DELETE, row_id)
    return {"id": row_id}
