# mfg_api/schemas/people.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

# ---- Departments ----
class DepartmentCreate(BaseModel):
    name: str
    location: Optional[str] = None
    manager: Optional[str] = None
    employee_count: int = 0

class DepartmentUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    manager: Optional[str] = None
    employee_count: Optional[int] = None

class DepartmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    location: Optional[str]
    manager: Optional[str]
    employee_count: int
    created_at: Optional[datetime] = None

# ---- Employees ----
class EmployeeCreate(BaseModel):
    name: str
    position: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[str] = None

class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[str] = None

class EmployeeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    position: Optional[str]
    department: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    join_date: Optional[str]
    created_at: Optional[datetime] = None
