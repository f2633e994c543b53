from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func, text
from ..core.db import Base

class Defect(Base):
    __tablename__ = "defects"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    product     = Column(String(200), nullable=False)
    description = Column(Text)
    reported_by = Column(String(200))
    report_date = Column(String(20))
    status      = Column(String(20), nullable=False, server_default=text("'Open'"))
    severity    = Column(String(20), nullable=False, server_default=text("'Medium'"))
    created_at  = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("status in ('Open','In Progress','Resolved','Closed')", name="ck_defects_status"),
        CheckConstraint("severity in ('Low','Medium','High','Critical')", name="ck_defects_severity"),
    )
