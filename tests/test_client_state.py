"""Tests for the ledger view state."""

from datetime import date
from unittest.mock import MagicMock

import httpx
import pytest

from client.api import LedgerClient
from client.state import LedgerView
from components.core.exceptions import LedgerRequestError

TODAY = date(2024, 3, 1)


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock(spec=LedgerClient)
    client.list_customers.return_value = [
        {"id": 1, "name": "Ali", "total_credit": 50.0},
        {"id": 2, "name": "Bina", "total_credit": 900.0},
        {"id": 3, "name": "Cyrus", "total_credit": -20.0},
    ]
    client.get_customer_details.return_value = {
        "customer": {"id": 2, "name": "Bina", "total_credit": 900.0},
        "loans": [],
    }
    return client


@pytest.fixture
def view(client: MagicMock) -> LedgerView:
    return LedgerView(client)


class TestFetchCustomers:
    """Tests for loading the customer list."""

    def test_sorted_by_balance(self, view: LedgerView) -> None:
        assert view.loading is True

        view.fetch_customers()

        assert [c["name"] for c in view.customers] == ["Bina", "Ali", "Cyrus"]
        assert view.loading is False
        assert view.error is None

    def test_failure_sets_banner(self, view: LedgerView, client: MagicMock) -> None:
        client.list_customers.side_effect = LedgerRequestError("Failed to fetch customers")

        view.fetch_customers()

        assert view.error == "Failed to load customers"
        assert view.customers == []
        assert view.loading is False

    def test_non_json_response_sets_banner(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        view = LedgerView(LedgerClient(base_url="http://ledger.test", transport=transport))

        view.fetch_customers()

        assert view.error == "Failed to load customers"
        assert view.customers == []


class TestWrites:
    """Tests for add and delete handlers."""

    def test_add_customer_closes_modal(self, view: LedgerView, client: MagicMock) -> None:
        view.show_add_customer = True

        view.add_customer({"name": "Dev"})

        client.add_customer.assert_called_once_with({"name": "Dev"})
        client.list_customers.assert_called_once()
        assert view.show_add_customer is False

    def test_add_customer_failure_keeps_modal(self, view: LedgerView, client: MagicMock) -> None:
        view.show_add_customer = True
        client.add_customer.side_effect = LedgerRequestError("Failed to add customer")

        view.add_customer({"name": "Dev"})

        assert view.error == "Failed to add customer"
        assert view.show_add_customer is True

    def test_add_transaction_refreshes_open_detail(self, view: LedgerView, client: MagicMock) -> None:
        view.selected_customer = {"customer": {"id": 2}, "loans": []}
        view.show_add_transaction = True

        view.add_transaction({"customer_id": 2, "amount": 10.0, "type": "payment"})

        client.get_customer_details.assert_called_once_with(2)
        assert view.selected_customer["customer"]["total_credit"] == 900.0
        assert view.show_add_transaction is False

    def test_add_transaction_failure(self, view: LedgerView, client: MagicMock) -> None:
        client.add_transaction.side_effect = LedgerRequestError("Failed to add transaction")

        view.add_transaction({"customer_id": 2, "amount": 10.0, "type": "payment"})

        assert view.error == "Failed to add transaction"
        client.list_customers.assert_not_called()

    def test_delete_clears_selection(self, view: LedgerView, client: MagicMock) -> None:
        view.selected_customer = {"customer": {"id": 2}, "loans": []}
        view.show_delete_confirmation = True

        view.delete_customer(2)

        client.delete_customer.assert_called_once_with(2)
        assert view.selected_customer is None
        assert view.show_delete_confirmation is False
        assert len(view.customers) == 3

    def test_delete_failure(self, view: LedgerView, client: MagicMock) -> None:
        client.delete_customer.side_effect = LedgerRequestError("Customer not found")

        view.delete_customer(2)

        assert view.error == "Failed to delete customer"


class TestCustomerDetails:
    """Tests for opening a customer."""

    def test_selects_customer(self, view: LedgerView) -> None:
        view.fetch_customer_details(2)

        assert view.selected_customer["customer"]["name"] == "Bina"

    def test_failure_shows_server_message(self, view: LedgerView, client: MagicMock) -> None:
        view.selected_customer = {"customer": {"id": 2}, "loans": []}
        client.get_customer_details.side_effect = LedgerRequestError("Customer not found")

        view.fetch_customer_details(2)

        assert view.error == "Customer not found"
        assert view.selected_customer is None


class TestForms:
    """Tests for form submission."""

    def test_invalid_customer_form_is_not_sent(self, view: LedgerView, client: MagicMock) -> None:
        errors = view.submit_customer_form({"name": "X"})

        assert errors == {"name": "Name must be at least 2 characters"}
        client.add_customer.assert_not_called()

    def test_valid_transaction_form_is_sent(self, view: LedgerView, client: MagicMock) -> None:
        errors = view.submit_transaction_form(
            {"customer_id": "1", "amount": "120", "type": "credit", "due_date": "2024-03-15"},
            today=TODAY,
        )

        assert errors == {}
        client.add_transaction.assert_called_once_with({
            "customer_id": 1,
            "amount": 120.0,
            "type": "credit",
            "description": "",
            "due_date": "2024-03-15",
        })
