"""Repository for transaction operations."""

from datetime import date
from typing import List
from sqlalchemy import and_, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from components.transaction.models import Transaction, TYPE_CREDIT, TYPE_PAYMENT
from components.transaction import schemas


class TransactionRepository:
    """Repository for transaction operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def add(self, transaction: schemas.TransactionCreate) -> Transaction:
        """
        Stage a new transaction and flush it. Does not commit.

        Due dates are kept for credits only.
        """
        db_transaction = Transaction(
            customer_id=transaction.customer_id,
            amount=transaction.amount,
            type=transaction.type,
            description=transaction.description,
            due_date=transaction.due_date if transaction.type == TYPE_CREDIT else None,
        )
        self.session.add(db_transaction)
        await self.session.flush()
        return db_transaction

    async def get_for_customer(self, customer_id: int, today: date) -> List[schemas.Transaction]:
        """
        Get all transactions of a customer, newest first.

        Each credit is flagged overdue when its due date is before `today`
        and the payments recorded on or after the credit add up to less
        than the credit amount.
        """
        payment = aliased(Transaction)
        paid_since = (
            select(func.coalesce(func.sum(payment.amount), 0))
            .where(
                payment.customer_id == customer_id,
                payment.type == TYPE_PAYMENT,
                payment.transaction_date >= Transaction.transaction_date,
            )
            .correlate(Transaction)
            .scalar_subquery()
        )
        is_overdue = case(
            (
                and_(
                    Transaction.type == TYPE_CREDIT,
                    Transaction.due_date < today,
                    paid_since < Transaction.amount,
                ),
                True,
            ),
            else_=False,
        ).label("is_overdue")

        result = await self.session.execute(
            select(Transaction, is_overdue)
            .where(Transaction.customer_id == customer_id)
            .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
        )

        return [
            schemas.Transaction.model_validate(transaction).model_copy(
                update={"is_overdue": bool(overdue)}
            )
            for transaction, overdue in result.all()
        ]
