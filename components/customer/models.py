"""Customer model for the database."""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric
from sqlalchemy.orm import relationship

from components.core.database import Base

STATUS_UP_TO_DATE = "up-to-date"
STATUS_OVERDUE = "overdue"


class Customer(Base):
    """Customer model representing a shop's credit account holder."""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    total_credit = Column(Numeric(10, 2), nullable=False, default=0)  # Positive - customer owes money
    next_due_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=STATUS_UP_TO_DATE)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    # Rows are removed by the database cascade
    transactions = relationship(
        "Transaction",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
