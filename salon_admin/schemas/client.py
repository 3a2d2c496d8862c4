"""Pydantic schemas for Clients."""

from datetime import datetime, date
from pydantic import BaseModel, EmailStr, field_validator
from salon_admin.schemas.common import reject_null


class ClientCreate(BaseModel):
    full_name: str
    phone: str
    email: EmailStr | None = None
    birth_date: date | None = None
    address: str | None = None
    notes: str | None = None


class ClientUpdate(BaseModel):
    """Fields an admin may change on an existing client."""
    full_name: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    birth_date: date | None = None
    address: str | None = None
    notes: str | None = None

    @field_validator("full_name", "phone", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)

    class Config:
        extra = "forbid"


class ClientOut(BaseModel):
    id: int
    full_name: str
    phone: str
    email: str | None = None
    birth_date: date | None = None
    address: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
