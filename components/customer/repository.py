"""Repository for customer operations."""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import case, exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from components.customer.models import Customer, STATUS_OVERDUE, STATUS_UP_TO_DATE
from components.customer import schemas
from components.transaction.models import Transaction, TYPE_CREDIT

# Customers without an upcoming due date sort after everyone else
FAR_FUTURE = date(9999, 12, 31)


class CustomerRepository:
    """Repository for customer operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, customer: schemas.CustomerCreate) -> Customer:
        """Create a new customer with a zero balance."""
        db_customer = Customer(
            name=customer.name,
            phone=customer.phone,
            address=customer.address,
            total_credit=Decimal("0"),
            status=STATUS_UP_TO_DATE,
        )
        self.session.add(db_customer)
        await self.session.commit()
        await self.session.refresh(db_customer)
        return db_customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        result = await self.session.execute(
            select(Customer)
            .where(Customer.id == customer_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all_with_status(self, today: date) -> List[schemas.Customer]:
        """
        Get all customers with their next due date and status as of `today`.

        A customer is overdue when any of their credits has a due date
        before `today`, whether or not it was paid back since. Overdue
        customers come first, then the rest by ascending next due date.
        """
        next_due = (
            select(
                Transaction.customer_id,
                func.min(Transaction.due_date).label("next_due_date"),
            )
            .where(Transaction.due_date >= today)
            .group_by(Transaction.customer_id)
            .subquery()
        )
        overdue = (
            select(Transaction.customer_id)
            .where(
                Transaction.type == TYPE_CREDIT,
                Transaction.due_date < today,
            )
            .distinct()
            .subquery()
        )
        is_overdue = overdue.c.customer_id.is_not(None)

        query = (
            select(
                Customer,
                next_due.c.next_due_date,
                case((is_overdue, STATUS_OVERDUE), else_=STATUS_UP_TO_DATE).label("status"),
            )
            .outerjoin(next_due, next_due.c.customer_id == Customer.id)
            .outerjoin(overdue, overdue.c.customer_id == Customer.id)
            .order_by(
                case((is_overdue, 0), else_=1),
                func.coalesce(next_due.c.next_due_date, FAR_FUTURE),
                Customer.id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)

        return [
            schemas.Customer.model_validate(customer).model_copy(
                update={"next_due_date": next_due_date, "status": status}
            )
            for customer, next_due_date, status in result.all()
        ]

    async def apply_balance_change(self, customer_id: int, change: Decimal) -> None:
        """Add `change` to the customer's running balance. Does not commit."""
        await self.session.execute(
            update(Customer)
            .where(Customer.id == customer_id)
            .values(total_credit=Customer.total_credit + change)
            .execution_options(synchronize_session=False)
        )

    async def refresh_derived_fields(self, customer_id: int, today: date) -> None:
        """Recompute and store next_due_date and status. Does not commit."""
        next_due_date = (
            select(func.min(Transaction.due_date))
            .where(
                Transaction.customer_id == customer_id,
                Transaction.due_date >= today,
            )
            .scalar_subquery()
        )
        has_overdue_credit = exists().where(
            Transaction.customer_id == customer_id,
            Transaction.type == TYPE_CREDIT,
            Transaction.due_date < today,
        )
        await self.session.execute(
            update(Customer)
            .where(Customer.id == customer_id)
            .values(
                next_due_date=next_due_date,
                status=case(
                    (has_overdue_credit, STATUS_OVERDUE),
                    else_=STATUS_UP_TO_DATE,
                ),
            )
            .execution_options(synchronize_session=False)
        )

    async def delete(self, customer_id: int) -> bool:
        """
        Delete customer by ID together with their transactions.

        Returns False when the customer does not exist. Store errors are
        re-raised after the session is rolled back.
        """
        db_customer = await self.get_by_id(customer_id)
        if not db_customer:
            return False

        try:
            await self.session.delete(db_customer)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return True
