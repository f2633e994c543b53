from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint, func, text
from ..core.db import Base

class Customer(Base):
    __tablename__ = "customers"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    name        = Column(String(200), nullable=False)
    contact     = Column(String(200))
    email       = Column(String(200))
    phone       = Column(String(50))
    address     = Column(String(500))
    order_count = Column(Integer, nullable=False, server_default=text("0"))
    status      = Column(String(20), nullable=False, server_default=text("'Active'"))
    created_at  = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("status in ('Active','Inactive')", name="ck_customers_status"),
    )
