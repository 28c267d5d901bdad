"""Script to seed demo customers and transactions into the database."""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete

from components.core.init_db import db_manager
from components.customer.models import Customer
from components.customer.schemas import CustomerCreate
from components.ledger.service import LedgerService
from components.transaction.models import Transaction
from components.transaction.schemas import TransactionCreate


async def seed_data():
    """Seed demo data into the database."""
    await db_manager.create_tables()

    async with db_manager.get_db() as db:
        # Clear existing data
        await db.execute(delete(Transaction))
        await db.execute(delete(Customer))
        await db.commit()

        service = LedgerService(db)
        today = date.today()

        customers = [
            CustomerCreate(name="Ramesh Kumar", phone="+91 98765 43210", address="12 Market Road"),
            CustomerCreate(name="Sunita Devi", phone="98450-12345", address="4 Temple Street"),
            CustomerCreate(name="Arjun Singh", phone="+91 99887 76655", address="Old Bus Stand"),
        ]
        created = [await service.add_customer(customer) for customer in customers]

        print("Adding transactions...")
        for i, customer in enumerate(created):
            await service.add_transaction(
                TransactionCreate(
                    customer_id=customer.id,
                    amount=Decimal("1500.00") + i * 500,
                    type="credit",
                    description="Groceries",
                    due_date=today + timedelta(days=7 * (i + 1)),
                )
            )
            await service.add_transaction(
                TransactionCreate(
                    customer_id=customer.id,
                    amount=Decimal("500.00"),
                    type="payment",
                    description="Cash",
                )
            )

    await db_manager.dispose()
    print("Seeding completed successfully!")

if __name__ == "__main__":
    asyncio.run(seed_data())
