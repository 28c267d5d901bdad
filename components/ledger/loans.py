"""Grouping of a customer's transactions into loans."""

from datetime import date
from typing import List

from components.ledger import schemas
from components.transaction import schemas as transaction_schemas
from components.transaction.models import TYPE_CREDIT, TYPE_PAYMENT


def group_loans(transactions: List[transaction_schemas.Transaction]) -> List[schemas.Loan]:
    """
    Build one loan per credit transaction.

    Every payment dated on or after a credit counts toward that credit, so
    with several open credits the same payment shows up under each of them.
    Overdue loans come first, then the rest by ascending due date; a
    credit without a due date sorts ahead of dated ones.
    """
    payments = [t for t in transactions if t.type == TYPE_PAYMENT]

    loans = []
    for credit in transactions:
        if credit.type != TYPE_CREDIT:
            continue

        loan_payments = [
            schemas.LoanPayment(
                amount=payment.amount,
                date=payment.transaction_date,
                description=payment.description,
            )
            for payment in payments
            if payment.transaction_date >= credit.transaction_date
        ]
        total_paid = sum(p.amount for p in loan_payments)

        loans.append(
            schemas.Loan(
                id=credit.id,
                credit_amount=credit.amount,
                item_sold=credit.description or "Credit",
                due_date=credit.due_date,
                credit_date=credit.transaction_date,
                total_paid=total_paid,
                remaining_balance=credit.amount - total_paid,
                is_overdue=credit.is_overdue,
                payments=loan_payments,
            )
        )

    loans.sort(key=lambda loan: (not loan.is_overdue, loan.due_date or date.min))
    return loans
