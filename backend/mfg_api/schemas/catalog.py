# mfg_api/schemas/catalog.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

# Prices and unit costs stay display strings ("$12.50"); the store does not parse them.

# ---- Products ----
class ProductCreate(BaseModel):
    name: str
    sku: Optional[str] = None
    category: Optional[str] = None
    price: Optional[str] = None
    stock: int = 0
    description: Optional[str] = None

class ProductUpdate(BaseModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    price: Optional[str] = None
    stock: Optional[int] = None
    description: Optional[str] = None

class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    sku: Optional[str]
    category: Optional[str]
    price: Optional[str]
    stock: int
    description: Optional[str]
    created_at: Optional[datetime] = None

# ---- Raw materials ----
class RawMaterialCreate(BaseModel):
    name: str
    code: Optional[str] = None
    category: Optional[str] = None
    supplier: Optional[str] = None
    stock_quantity: int = 0
    unit_cost: Optional[str] = None
    description: Optional[str] = None

class RawMaterialUpdate(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None
    category: Optional[str] = None
    supplier: Optional[str] = None
    stock_quantity: Optional[int] = None
    unit_cost: Optional[str] = None
    description: Optional[str] = None

class RawMaterialRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    code: Optional[str]
    category: Optional[str]
    supplier: Optional[str]
    stock_quantity: int
    unit_cost: Optional[str]
    description: Optional[str]
    created_at: Optional[datetime] = None

# ---- Material mappings ----
class MaterialMappingCreate(BaseModel):
    product: str
    material: str
    quantity: float = 0
    unit: Optional[str] = None
    cost: Optional[str] = None

class MaterialMappingUpdate(BaseModel):
    product: Optional[str] = None
    material: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    cost: Optional[str] = None

class MaterialMappingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    product: str
    material: str
    quantity: float
    unit: Optional[str]
    cost: Optional[str]
    created_at: Optional[datetime] = None
