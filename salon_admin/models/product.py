"""Product model: retail and supply inventory."""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text
from datetime import datetime
from salon_admin.core.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    minimum_stock = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
