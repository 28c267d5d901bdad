"""Transaction model for the database."""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from components.core.database import Base

TYPE_CREDIT = "credit"
TYPE_PAYMENT = "payment"


class Transaction(Base):
    """Transaction model for credits given and payments received."""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(String(20), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(Date, nullable=True)  # Set for credits only
    transaction_date = Column(DateTime, nullable=False, default=datetime.now)

    # Relationships
    customer = relationship("Customer", back_populates="transactions")
