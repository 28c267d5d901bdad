"""Ledger service: the five actions behind the ledger endpoint."""

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import (
    CustomerDeletionError,
    CustomerNotFoundError,
    MissingPayloadError,
)
from components.customer import schemas as customer_schemas
from components.customer.repository import CustomerRepository
from components.ledger import schemas
from components.ledger.loans import group_loans
from components.transaction import schemas as transaction_schemas
from components.transaction.models import TYPE_CREDIT
from components.transaction.repository import TransactionRepository

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Stateless ledger operations over one database session.

    `today` returns the date that due dates are compared against; it
    defaults to the local calendar date.
    """

    def __init__(self, session: AsyncSession, today: Optional[Callable[[], date]] = None):
        self.session = session
        self.customers = CustomerRepository(session)
        self.transactions = TransactionRepository(session)
        self._today = today or date.today

    async def handle(self, request: schemas.LedgerRequest) -> Any:
        """
        Run the action named in the request.

        Missing customers and failed deletions come back as an error body.
        Unknown actions return None.
        """
        handlers: Dict[str, Callable[[schemas.LedgerRequest], Any]] = {
            "listCustomers": lambda r: self.list_customers(),
            "addCustomer": lambda r: self.add_customer(_require(r.customer_data, "customerData")),
            "addTransaction": lambda r: self.add_transaction(
                _require(r.transaction_data, "transactionData")
            ),
            "getCustomerDetails": lambda r: self.get_customer_details(
                _require(r.customer_id, "customerId")
            ),
            "deleteCustomer": lambda r: self.delete_customer(_require(r.customer_id, "customerId")),
        }

        handler = handlers.get(request.action)
        if handler is None:
            logger.warning("Unknown ledger action: %s", request.action)
            return None

        logger.debug("Handling ledger action %s", request.action)
        try:
            return await handler(request)
        except (CustomerNotFoundError, CustomerDeletionError) as e:
            return schemas.ErrorResponse(error=str(e))

    async def list_customers(self) -> List[customer_schemas.Customer]:
        """List customers, overdue first, then by next due date."""
        return await self.customers.get_all_with_status(self._today())

    async def add_customer(self, customer: customer_schemas.CustomerCreate) -> customer_schemas.Customer:
        """Create a customer with a zero balance."""
        db_customer = await self.customers.create(customer)
        logger.info("Created customer %s (%s)", db_customer.id, db_customer.name)
        return customer_schemas.Customer.model_validate(db_customer)

    async def add_transaction(self, transaction: transaction_schemas.TransactionCreate) -> schemas.SuccessResponse:
        """
        Record a transaction and update the customer's balance, next due
        date and status. Either all of it is committed or none of it.
        """
        change = transaction.amount if transaction.type == TYPE_CREDIT else -transaction.amount
        try:
            await self.transactions.add(transaction)
            await self.customers.apply_balance_change(transaction.customer_id, change)
            await self.customers.refresh_derived_fields(transaction.customer_id, self._today())
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.exception(
                "Failed to add %s transaction for customer %s",
                transaction.type,
                transaction.customer_id,
            )
            raise

        logger.info(
            "Recorded %s of %s for customer %s",
            transaction.type,
            transaction.amount,
            transaction.customer_id,
        )
        return schemas.SuccessResponse()

    async def get_customer_details(self, customer_id: int) -> schemas.CustomerDetails:
        """Get a customer together with their loans."""
        db_customer = await self.customers.get_by_id(customer_id)
        if db_customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise CustomerNotFoundError()

        transactions = await self.transactions.get_for_customer(customer_id, self._today())
        return schemas.CustomerDetails(
            customer=customer_schemas.Customer.model_validate(db_customer),
            loans=group_loans(transactions),
        )

    async def delete_customer(self, customer_id: int) -> schemas.SuccessResponse:
        """Delete a customer and all of their transactions."""
        try:
            deleted = await self.customers.delete(customer_id)
        except SQLAlchemyError as e:
            logger.exception("Error deleting customer %s", customer_id)
            raise CustomerDeletionError() from e

        if not deleted:
            logger.warning("Customer %s not found", customer_id)
            raise CustomerNotFoundError()

        logger.info("Deleted customer %s", customer_id)
        return schemas.SuccessResponse()


def _require(value: Any, field: str) -> Any:
    if value is None:
        raise MissingPayloadError(f"Missing required field: {field}")
    return value
