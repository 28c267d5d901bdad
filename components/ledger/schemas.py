"""Pydantic schemas for the ledger endpoint."""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from components.customer.schemas import Customer, CustomerCreate
from components.transaction.schemas import TransactionCreate


class LedgerRequest(BaseModel):
    """Request body of the ledger endpoint: an action and its payload."""
    action: str
    customer_id: Optional[int] = Field(None, alias="customerId")
    customer_data: Optional[CustomerCreate] = Field(None, alias="customerData")
    transaction_data: Optional[TransactionCreate] = Field(None, alias="transactionData")

    class Config:
        populate_by_name = True


class LoanPayment(BaseModel):
    """Schema for a payment attributed to a loan."""
    amount: float
    date: datetime
    description: Optional[str] = None


class Loan(BaseModel):
    """Schema for a credit together with the payments made since."""
    id: int
    credit_amount: float
    item_sold: str
    due_date: Optional[date] = None
    credit_date: datetime
    total_paid: float
    remaining_balance: float
    is_overdue: bool
    payments: List[LoanPayment]


class CustomerDetails(BaseModel):
    """Schema for customer detail response."""
    customer: Customer
    loans: List[Loan]


class SuccessResponse(BaseModel):
    """Schema for a successful write."""
    success: bool = True


class ErrorResponse(BaseModel):
    """Schema for a failed action."""
    error: str
