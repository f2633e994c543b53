from sqlalchemy import Column, Integer, String, DateTime, func
from ..core.db import Base

class Employee(Base):
    __tablename__ = "employees"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(200), nullable=False)
    position   = Column(String(200))
    # department name, denormalized (no FK to departments)
    department = Column(String(200))
    email      = Column(String(200))
    phone      = Column(String(50))
    join_date  = Column(String(20))
    created_at = Column(DateTime, nullable=False, server_default=func.now())
