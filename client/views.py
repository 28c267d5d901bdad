"""View models for customer cards and loan details."""

from datetime import date
from typing import Any, Dict, Optional, Union


def format_amount(amount: float) -> str:
    return f"₹{amount:.2f}"


def status_label(status: str) -> str:
    return "Overdue" if status == "overdue" else "Up to date"


def _as_date(value: Union[str, date, None]) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def customer_card(customer: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
    """Build what a customer card in the list shows."""
    today = today or date.today()
    next_due = _as_date(customer.get("next_due_date"))
    return {
        "id": customer["id"],
        "name": customer["name"],
        "phone": customer.get("phone") or "",
        "address": customer.get("address") or "",
        "overdue": customer.get("status") == "overdue",
        "status_label": status_label(customer.get("status", "")),
        "total_credit": format_amount(customer["total_credit"]),
        "owes_money": customer["total_credit"] > 0,
        "next_due_date": next_due.isoformat() if next_due else None,
        "next_due_passed": next_due is not None and next_due < today,
    }


def loan_tone(loan: Dict[str, Any]) -> str:
    """Overdue, pending while a balance remains, settled otherwise."""
    if loan["is_overdue"]:
        return "overdue"
    if loan["remaining_balance"] > 0:
        return "pending"
    return "settled"


def loan_detail(loan: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the loan section of the customer detail.

    The progress percentage is capped at 100 since a payment can count
    toward more than one loan.
    """
    credit_amount = loan["credit_amount"]
    if credit_amount > 0:
        paid_percent = min(100.0, loan["total_paid"] / credit_amount * 100)
    else:
        paid_percent = 100.0

    due_date = _as_date(loan.get("due_date"))
    return {
        "id": loan["id"],
        "title": loan.get("item_sold") or "Credit",
        "amount": format_amount(credit_amount),
        "due": f"Due: {due_date.isoformat()}" if due_date else "Due: -",
        "progress": f"{format_amount(loan['total_paid'])} of {format_amount(credit_amount)}",
        "paid_percent": round(paid_percent, 2),
        "remaining_balance": format_amount(loan["remaining_balance"]),
        "tone": loan_tone(loan),
        "payments": [
            {
                "amount": format_amount(payment["amount"]),
                "description": payment.get("description") or "",
                "date": str(payment["date"])[:10],
            }
            for payment in loan.get("payments", [])
        ],
    }
