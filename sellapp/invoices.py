from __future__ import annotations

import requests

from .endpoints import Body, Id


class InvoicesMixin:
    # --- Invoices (orders), v2 ---
    def invoices_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("invoices_list_all", url_params=url_params)

    def invoices_create(self, data: Body) -> requests.Response:
        """Create an invoice for a customer."""
        return self._dispatch("invoices_create", data=data)

    def invoices_get(self, invoice_id: Id) -> requests.Response:
        return self._dispatch("invoices_get", invoice_id=invoice_id)

    # --- Invoice actions ---
    def invoices_checkout(self, invoice_id: Id) -> requests.Response:
        """Start a checkout session for the invoice (POST, no body)."""
        return self._dispatch("invoices_checkout", invoice_id=invoice_id)

    def invoices_get_items(self, invoice_id: Id) -> requests.Response:
        """Fetch the deliverables of the invoice."""
        return self._dispatch("invoices_get_items", invoice_id=invoice_id)

    def invoices_mark_completed(self, invoice_id: Id) -> requests.Response:
        """
        Mark a pending invoice as completed.
        Sell.app completes paid invoices on its own, so this is rarely needed.
        """
        return self._dispatch("invoices_mark_completed", invoice_id=invoice_id)

    def invoices_mark_voided(self, invoice_id: Id) -> requests.Response:
        return self._dispatch("invoices_mark_voided", invoice_id=invoice_id)

    def invoices_issue_replacement(self, invoice_id: Id, data: Body) -> requests.Response:
        """``data`` holds the product variant IDs to replace from."""
        return self._dispatch("invoices_issue_replacement", data=data, invoice_id=invoice_id)
