"""Ledger endpoint: one POST route multiplexing the ledger actions."""

from typing import Any
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import MissingPayloadError
from components.core.init_db import get_db
from components.ledger import schemas
from components.ledger.service import LedgerService

router = APIRouter(
    prefix="/api",
    tags=["ledger"],
)


@router.post("/crediKhaata")
async def ledger(
    request: schemas.LedgerRequest,
    db: AsyncSession = Depends(get_db)
) -> Any:
    """
    Run a ledger action.

    Actions:
    - listCustomers: all customers with next due date and status
    - addCustomer: create a customer from `customerData`
    - addTransaction: record a credit or payment from `transactionData`
    - getCustomerDetails: customer with loans for `customerId`
    - deleteCustomer: remove the customer `customerId` and their transactions

    Unknown actions return null.
    """
    service = LedgerService(db)
    try:
        return await service.handle(request)
    except MissingPayloadError as e:
        raise HTTPException(status_code=422, detail=str(e))
