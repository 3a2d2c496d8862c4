"""Pydantic schemas for inventory Products."""

from datetime import datetime
from pydantic import BaseModel, Field, computed_field, field_validator
from salon_admin.schemas.common import reject_null
from salon_admin.services.stats import stock_status


class ProductCreate(BaseModel):
    name: str
    category: str
    quantity: int = Field(0, ge=0)
    minimum_stock: int = Field(0, ge=0)
    price: float = Field(0, ge=0)
    description: str | None = None


class ProductUpdate(BaseModel):
    """Fields an admin may change on an existing product."""
    name: str | None = None
    category: str | None = None
    quantity: int | None = Field(None, ge=0)
    minimum_stock: int | None = Field(None, ge=0)
    price: float | None = Field(None, ge=0)
    description: str | None = None

    @field_validator("name", "category", "quantity", "minimum_stock", "price", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)

    class Config:
        extra = "forbid"


class ProductOut(BaseModel):
    id: int
    name: str
    category: str
    quantity: int = 0
    minimum_stock: int = 0
    price: float = 0
    description: str | None = None
    created_at: datetime | None = None

    @computed_field
    @property
    def stock_status(self) -> str:
        """Derived on every read, never stored."""
        return stock_status(self.quantity, self.minimum_stock)

    class Config:
        from_attributes = True
