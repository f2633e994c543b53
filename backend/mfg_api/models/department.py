from sqlalchemy import Column, Integer, String, DateTime, func, text
from ..core.db import Base

class Department(Base):
    __tablename__ = "departments"

    id             = Column(Integer, primary_key=True, autoincrement=True)
    name           = Column(String(200), nullable=False)
    location       = Column(String(200))
    manager        = Column(String(200))
    # informational only, not derived from employees
    employee_count = Column(Integer, nullable=False, server_default=text("0"))
    created_at     = Column(DateTime, nullable=False, server_default=func.now())
