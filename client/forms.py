"""Client-side validation of the customer and transaction forms."""

import math
import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from components.core.exceptions import FormValidationError

PHONE_PATTERN = re.compile(r"^[+]?[\d\s-]{10,}$")


def _parse_amount(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_date(value: Union[str, date, None]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def validate_customer_form(form: Dict[str, Any]) -> Dict[str, str]:
    """Return field errors of the add-customer form, empty when valid."""
    errors = {}

    name = form.get("name") or ""
    if not name.strip():
        errors["name"] = "Name is required"
    elif len(name) < 2:
        errors["name"] = "Name must be at least 2 characters"

    # Phone is optional but must be valid if provided
    phone = form.get("phone")
    if phone and not PHONE_PATTERN.match(phone):
        errors["phone"] = "Please enter a valid phone number"

    return errors


def validate_transaction_form(form: Dict[str, Any], today: Optional[date] = None) -> Dict[str, str]:
    """Return field errors of the add-transaction form, empty when valid."""
    errors = {}
    today = today or date.today()

    if not form.get("customer_id"):
        errors["customer_id"] = "Please select a customer"

    if form.get("amount") in (None, ""):
        errors["amount"] = "Amount is required"
    else:
        amount = _parse_amount(form["amount"])
        if amount is None or math.isnan(amount) or amount <= 0:
            errors["amount"] = "Please enter a valid positive amount"

    if form.get("type", "credit") == "credit":
        if not form.get("due_date"):
            errors["due_date"] = "Due date is required for credit"
        else:
            due_date = _parse_date(form["due_date"])
            if due_date is None:
                errors["due_date"] = "Please enter a valid due date"
            elif due_date < today:
                errors["due_date"] = "Due date cannot be in the past"

    return errors


def clean_customer_form(form: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the customer form and return the `customerData` payload."""
    errors = validate_customer_form(form)
    if errors:
        raise FormValidationError(errors)
    return {
        "name": form["name"],
        "phone": form.get("phone") or "",
        "address": form.get("address") or "",
    }


def clean_transaction_form(form: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
    """
    Validate the transaction form and return the `transactionData` payload.

    The due date is only sent for credits.
    """
    errors = validate_transaction_form(form, today)
    if errors:
        raise FormValidationError(errors)

    transaction_type = form.get("type", "credit")
    due_date = _parse_date(form.get("due_date")) if transaction_type == "credit" else None
    return {
        "customer_id": int(form["customer_id"]),
        "amount": float(form["amount"]),
        "type": transaction_type,
        "description": form.get("description") or "",
        "due_date": due_date.isoformat() if due_date else None,
    }
