"""Pydantic schemas for customer data validation."""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel


class CustomerBase(BaseModel):
    """Base customer schema."""
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerCreate(CustomerBase):
    """Schema for customer creation."""
    pass


class Customer(CustomerBase):
    """Schema for customer response."""
    id: int
    total_credit: float = 0
    next_due_date: Optional[date] = None
    status: str = "up-to-date"
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
