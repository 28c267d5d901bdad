"""HTTP client for the ledger endpoint."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from components.core.exceptions import LedgerRequestError

logger = logging.getLogger(__name__)

LEDGER_PATH = "/api/crediKhaata"


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def normalize_customer(customer: Dict[str, Any]) -> Dict[str, Any]:
    """Parse the customer's balance to a float."""
    return {**customer, "total_credit": _to_float(customer.get("total_credit"))}


def normalize_loan(loan: Dict[str, Any]) -> Dict[str, Any]:
    """Parse every amount of a loan and its payments to floats."""
    return {
        **loan,
        "credit_amount": _to_float(loan.get("credit_amount")),
        "total_paid": _to_float(loan.get("total_paid")),
        "remaining_balance": _to_float(loan.get("remaining_balance")),
        "payments": [
            {**payment, "amount": _to_float(payment.get("amount"))}
            for payment in loan.get("payments") or []
        ],
    }


class LedgerClient:
    """Calls the ledger endpoint, one method per action."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "LedgerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _post(self, action: str, failure: str, **payload: Any) -> Any:
        try:
            response = self._http.post(LEDGER_PATH, json={"action": action, **payload})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Ledger action %s failed: %s", action, e)
            raise LedgerRequestError(failure) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Ledger action %s returned a non-JSON body", action)
            raise LedgerRequestError(failure) from e

        if isinstance(data, dict) and data.get("error"):
            raise LedgerRequestError(data["error"])
        return data

    def list_customers(self) -> List[Dict[str, Any]]:
        data = self._post("listCustomers", "Failed to fetch customers")
        return [normalize_customer(customer) for customer in data or []]

    def add_customer(self, customer_data: Dict[str, Any]) -> Dict[str, Any]:
        data = self._post("addCustomer", "Failed to add customer", customerData=customer_data)
        return normalize_customer(data)

    def add_transaction(self, transaction_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._post("addTransaction", "Failed to add transaction", transactionData=transaction_data)

    def get_customer_details(self, customer_id: int) -> Dict[str, Any]:
        """Fetch a customer and their loans, with every amount as a float."""
        data = self._post(
            "getCustomerDetails",
            "Failed to fetch customer details",
            customerId=customer_id,
        )
        if not isinstance(data, dict) or "customer" not in data or "loans" not in data:
            raise LedgerRequestError("Invalid response format from server")

        return {
            "customer": normalize_customer(data["customer"]),
            "loans": [normalize_loan(loan) for loan in data["loans"]],
        }

    def delete_customer(self, customer_id: int) -> Dict[str, Any]:
        return self._post("deleteCustomer", "Failed to delete customer", customerId=customer_id)
