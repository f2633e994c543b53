from sqlalchemy import Column, Integer, String, Text, DateTime, func, text
from ..core.db import Base

class RawMaterial(Base):
    __tablename__ = "raw_materials"

    id             = Column(Integer, primary_key=True, autoincrement=True)
    name           = Column(String(200), nullable=False)
    code           = Column(String(50))
    category       = Column(String(100))
    supplier       = Column(String(200))
    stock_quantity = Column(Integer, nullable=False, server_default=text("0"))
    unit_cost      = Column(String(50))
    description    = Column(Text)
    created_at     = Column(DateTime, nullable=False, server_default=func.now())
