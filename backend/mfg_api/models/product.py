from sqlalchemy import Column, Integer, String, Text, DateTime, func, text
from ..core.db import Base

class Product(Base):
    __tablename__ = "products"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    name        = Column(String(200), nullable=False)
    sku         = Column(String(50))
    category    = Column(String(100))
    # display string with currency symbol, e.g. "$149.99"
    price       = Column(String(50))
    stock       = Column(Integer, nullable=False, server_default=text("0"))
    description = Column(Text)
    created_at  = Column(DateTime, nullable=False, server_default=func.now())
