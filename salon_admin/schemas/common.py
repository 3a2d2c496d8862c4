"""Response envelopes shared by every collection endpoint."""

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """`{"data": ...}` envelope used by the admin panel."""
    data: T


class MessageResponse(BaseModel):
    message: str


def reject_null(value):
    """Update fields may be left out, but a required column cannot be set to null."""
    if value is None:
        raise ValueError("may be omitted but not set to null")
    return value
