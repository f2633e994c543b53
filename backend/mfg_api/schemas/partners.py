# mfg_api/schemas/partners.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..domain.constants import PartnerStatus

# ---- Customers ----
class CustomerCreate(BaseModel):
    name: str
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    order_count: int = 0
    status: PartnerStatus = "Active"

class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    order_count: Optional[int] = None
    status: Optional[PartnerStatus] = None

class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    contact: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    order_count: int
    status: PartnerStatus
    created_at: Optional[datetime] = None

# ---- Suppliers ----
class SupplierCreate(BaseModel):
    name: str
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    materials: Optional[str] = None
    status: PartnerStatus = "Active"

class SupplierUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    materials: Optional[str] = None
    status: Optional[PartnerStatus] = None

class SupplierRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    contact: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    materials: Optional[str]
    status: PartnerStatus
    created_at: Optional[datetime] = None
