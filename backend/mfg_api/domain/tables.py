# backend/mfg_api/domain/tables.py
"""
Registry of the tables the store exposes over /rest and /realtime.

Every entry binds a snake_case table identifier to its ORM model and the
pydantic schemas used to validate inserts, validate patches and serialize rows.
"""
from dataclasses import dataclass
from typing import Dict, Type

from fastapi import HTTPException
from pydantic import BaseModel

from ..models import (
    Customer,
    Defect,
    Department,
    Employee,
    MaterialMapping,
    Product,
    RawMaterial,
    Supplier,
)
from ..schemas.catalog import (
    MaterialMappingCreate, MaterialMappingRead, MaterialMappingUpdate,
    ProductCreate, ProductRead, ProductUpdate,
    RawMaterialCreate, RawMaterialRead, RawMaterialUpdate,
)
from ..schemas.partners import (
    CustomerCreate, CustomerRead, CustomerUpdate,
    SupplierCreate, SupplierRead, SupplierUpdate,
)
from ..schemas.people import (
    DepartmentCreate, DepartmentRead, DepartmentUpdate,
    EmployeeCreate, EmployeeRead, EmployeeUpdate,
)
from ..schemas.quality import DefectCreate, DefectRead, DefectUpdate


@dataclass(frozen=True)
class TableDef:
    name: str
    model: type
    create: Type[BaseModel]
    update: Type[BaseModel]
    read: Type[BaseModel]

    @property
    def columns(self) -> tuple:
        return tuple(c.name for c in self.model.__table__.columns)


TABLES: Dict[str, TableDef] = {
    t.name: t
    for t in (
        TableDef("departments", Department, DepartmentCreate, DepartmentUpdate, DepartmentRead),
        TableDef("employees", Employee, EmployeeCreate, EmployeeUpdate, EmployeeRead),
        TableDef("products", Product, ProductCreate, ProductUpdate, ProductRead),
        TableDef("raw_materials", RawMaterial, RawMaterialCreate, RawMaterialUpdate, RawMaterialRead),
        TableDef("customers", Customer, CustomerCreate, CustomerUpdate, CustomerRead),
        TableDef("suppliers", Supplier, SupplierCreate, SupplierUpdate, SupplierRead),
        TableDef("defects", Defect, DefectCreate, DefectUpdate, DefectRead),
        TableDef("material_mappings", MaterialMapping, MaterialMappingCreate, MaterialMappingUpdate, MaterialMappingRead),
    )
}


def get_table(name: str) -> TableDef:
    tdef = TABLES.get(name)
    if tdef is None:
        raise HTTPException(status_code=404, detail=f"Unknown table: {name}")
    return tdef
