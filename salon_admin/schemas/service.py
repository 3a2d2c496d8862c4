"""Pydantic schemas for salon Services."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from salon_admin.schemas.common import reject_null


class ServiceCreate(BaseModel):
    name: str
    category: str
    duration_minutes: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    description: str | None = None
    active: bool = True


class ServiceUpdate(BaseModel):
    """Fields an admin may change on an existing service."""
    name: str | None = None
    category: str | None = None
    duration_minutes: int | None = Field(None, ge=1)
    price: float | None = Field(None, ge=0)
    description: str | None = None
    active: bool | None = None

    @field_validator("name", "category", "duration_minutes", "price", "active", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)

    class Config:
        extra = "forbid"


class ServiceOut(BaseModel):
    id: int
    name: str
    category: str
    duration_minutes: int
    price: float
    description: str | None = None
    active: bool = True
    created_at: datetime | None = None

    class Config:
        from_attributes = True
