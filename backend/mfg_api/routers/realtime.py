# mfg_api/routers/realtime.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.api import ok
from ..core.security import require_api_key
from ..domain.tables import get_table
from ..services.change_feed import change_log

router = APIRouter(prefix="/realtime", tags=["realtime"], dependencies=[Depends(require_api_key)])


@router.get("/{table}")
def table_changes(table: str, after: Optional[int] = Query(None, ge=0)):
    """
    Poll the change feed of one table.

    Without `after` only the current cursor is returned (subscribe time);
    with `after` every event of this table with a greater seq is returned.
    A changed `epoch` or `truncated: true` tells the reader to reload.
    """
    tdef = get_table(table)
    return ok(change_log.since(tdef.name, after))
