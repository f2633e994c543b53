from sqlalchemy import Column, Integer, String, Float, DateTime, func, text
from ..core.db import Base

class MaterialMapping(Base):
    __tablename__ = "material_mappings"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    product    = Column(String(200), nullable=False)
    material   = Column(String(200), nullable=False)
    quantity   = Column(Float, nullable=False, server_default=text("0"))
    unit       = Column(String(20))
    # baked at submit time by the client ("$31.25")
    cost       = Column(String(50))
    created_at = Column(DateTime, nullable=False, server_default=func.now())
