from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func, text
from ..core.db import Base

class Supplier(Base):
    __tablename__ = "suppliers"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(200), nullable=False)
    contact    = Column(String(200))
    email      = Column(String(200))
    phone      = Column(String(50))
    address    = Column(String(500))
    # free text, e.g. "Stainless Steel, Carbon Steel"
    materials  = Column(Text)
    status     = Column(String(20), nullable=False, server_default=text("'Active'"))
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("status in ('Active','Inactive')", name="ck_suppliers_status"),
    )
