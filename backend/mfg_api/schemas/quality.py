# mfg_api/schemas/quality.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..domain.constants import DefectStatus, DefectSeverity

class DefectCreate(BaseModel):
    product: str
    description: Optional[str] = None
    reported_by: Optional[str] = None
    report_date: Optional[str] = None
    status: DefectStatus = "Open"
    severity: DefectSeverity = "Medium"

class DefectUpdate(BaseModel):
    product: Optional[str] = None
    description: Optional[str] = None
    reported_by: Optional[str] = None
    report_date: Optional[str] = None
    status: Optional[DefectStatus] = None
    severity: Optional[DefectSeverity] = None

class DefectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    product: str
    description: Optional[str]
    reported_by: Optional[str]
    report_date: Optional[str]
    status: DefectStatus
    severity: DefectSeverity
    created_at: Optional[datetime] = None
