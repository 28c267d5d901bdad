"""Pydantic schemas for transaction data validation."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel


class TransactionCreate(BaseModel):
    """
    Schema for transaction creation.

    Only the shape is checked here: the type, the sign of the amount and
    the existence of the customer are left to the store.
    """
    customer_id: int
    amount: Decimal
    type: str
    description: Optional[str] = None
    due_date: Optional[date] = None


class Transaction(BaseModel):
    """Schema for transaction response."""
    id: int
    customer_id: int
    amount: float
    type: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    transaction_date: datetime
    is_overdue: bool = False

    class Config:
        from_attributes = True
