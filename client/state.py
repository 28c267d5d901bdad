"""In-memory view state of the ledger screen."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from client.api import LedgerClient
from client.forms import clean_customer_form, clean_transaction_form
from components.core.exceptions import FormValidationError, LedgerRequestError

logger = logging.getLogger(__name__)


class LedgerView:
    """
    Holds what the ledger screen shows and updates it through the client.

    Every failed request leaves a banner message in `error` instead of
    raising.
    """

    def __init__(self, client: LedgerClient):
        self.client = client
        self.customers: List[Dict[str, Any]] = []
        self.selected_customer: Optional[Dict[str, Any]] = None
        self.show_add_customer = False
        self.show_add_transaction = False
        self.show_delete_confirmation = False
        self.loading = True
        self.error: Optional[str] = None

    def fetch_customers(self) -> None:
        """Load customers, highest balance first."""
        try:
            customers = self.client.list_customers()
        except LedgerRequestError:
            logger.exception("Failed to load customers")
            self.error = "Failed to load customers"
        else:
            self.customers = sorted(customers, key=lambda c: c["total_credit"], reverse=True)
        finally:
            self.loading = False

    def add_customer(self, customer_data: Dict[str, Any]) -> None:
        try:
            self.client.add_customer(customer_data)
        except LedgerRequestError:
            logger.exception("Failed to add customer")
            self.error = "Failed to add customer"
            return
        self.fetch_customers()
        self.show_add_customer = False

    def add_transaction(self, transaction_data: Dict[str, Any]) -> None:
        """Record a transaction and refresh the list and any open detail."""
        try:
            self.client.add_transaction(transaction_data)
        except LedgerRequestError:
            logger.exception("Failed to add transaction")
            self.error = "Failed to add transaction"
            return
        self.fetch_customers()
        if self.selected_customer:
            self.fetch_customer_details(self.selected_customer["customer"]["id"])
        self.show_add_transaction = False

    def fetch_customer_details(self, customer_id: int) -> None:
        try:
            self.selected_customer = self.client.get_customer_details(customer_id)
        except LedgerRequestError as e:
            logger.error("Error fetching customer details: %s", e)
            self.error = str(e) or "Failed to load customer details"
            self.selected_customer = None

    def delete_customer(self, customer_id: int) -> None:
        try:
            self.client.delete_customer(customer_id)
        except LedgerRequestError:
            logger.exception("Failed to delete customer")
            self.error = "Failed to delete customer"
            return
        self.selected_customer = None
        self.show_delete_confirmation = False
        self.fetch_customers()

    def submit_customer_form(self, form: Dict[str, Any]) -> Dict[str, str]:
        """Validate the form and add the customer when it is valid. Returns field errors."""
        try:
            customer_data = clean_customer_form(form)
        except FormValidationError as e:
            return e.errors
        self.add_customer(customer_data)
        return {}

    def submit_transaction_form(self, form: Dict[str, Any], today: Optional[date] = None) -> Dict[str, str]:
        """Validate the form and record the transaction when it is valid. Returns field errors."""
        try:
            transaction_data = clean_transaction_form(form, today)
        except FormValidationError as e:
            return e.errors
        self.add_transaction(transaction_data)
        return {}
