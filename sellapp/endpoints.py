"""
Every Sell.app endpoint the client knows about, in one table.

Paths are relative to the API root and carry their own version prefix,
since the vendor mixes v1 and v2 resources. Placeholders are filled from
the identifiers given to the matching client method.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

# Resource identifiers and pre-serialized JSON bodies
Id = Union[int, str]
Body = Union[str, bytes]

DOCS_URL = "https://developer.sell.app"


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    needs_body: bool = False
    docs: str = ""

    def build_path(self, *, url_params: str = "", **ids: Id) -> str:
        # ids go in as-is, url_params is appended untouched
        path = self.path.format(**{k: str(v) for k, v in ids.items()})
        return f"{path}{url_params}"


def _ep(name: str, method: str, path: str, needs_body: bool = False, docs: str = "") -> Endpoint:
    return Endpoint(name, method, path, needs_body, f"{DOCS_URL}/{docs}" if docs else "")


_TABLE = [
    # --- Blacklists ---
    _ep("blacklist_list_all_rules", "GET", "v1/blacklists", docs="blacklists#list-all-blacklist-rules"),
    _ep("blacklist_create_rule", "POST", "v1/blacklists", True, "blacklists#create-a-blacklist-rule"),
    _ep("blacklist_get_rule", "GET", "v1/blacklists/{rule_id}", docs="blacklists#retrieve-a-blacklist-rule"),
    _ep("blacklist_update_rule", "PATCH", "v1/blacklists/{rule_id}", True, "blacklists#update-a-blacklist-rule"),
    _ep("blacklist_delete_rule", "DELETE", "v1/blacklists/{rule_id}", docs="blacklists#delete-a-blacklist-rule"),

    # --- Coupons ---
    _ep("coupons_list_all", "GET", "v1/coupons", docs="coupons#list-all-coupons"),
    _ep("coupons_create", "POST", "v1/coupons", True, "coupons#create-a-coupon"),
    _ep("coupons_get", "GET", "v1/coupons/{coupon_id}", docs="coupons#retrieve-a-coupon"),
    _ep("coupons_update", "PATCH", "v1/coupons/{coupon_id}", True, "coupons#update-a-coupon"),
    _ep("coupons_delete", "DELETE", "v1/coupons/{coupon_id}", docs="coupons#delete-a-coupon"),

    # --- Feedback ---
    _ep("feedback_list_all", "GET", "v1/feedback", docs="feedback#list-all-feedback"),
    _ep("feedback_get", "GET", "v1/feedback/{feedback_id}", docs="feedback#retrieve-specific-feedback"),
    _ep("feedback_reply", "PATCH", "v1/feedback/{feedback_id}", True, "feedback#reply-to-feedback"),

    # --- Groups ---
    _ep("groups_list_all", "GET", "v2/groups", docs="groups#list-all-groups"),
    _ep("groups_create", "POST", "v2/groups", True, "groups#create-a-group"),
    _ep("groups_get", "GET", "v2/groups/{group_id}", docs="groups#retrieve-a-group"),
    _ep("groups_update", "PATCH", "v2/groups/{group_id}", True, "groups#update-a-group"),
    _ep("groups_delete", "DELETE", "v2/groups/{group_id}", docs="groups#delete-a-group"),
    _ep("groups_add_products", "POST", "v2/groups/{group_id}/products/attach", True,
        "groups#add-products-to-group"),
    _ep("groups_remove_products", "DELETE", "v2/groups/{group_id}/products/detach", True,
        "groups#remove-products-from-group"),
    _ep("groups_list_products", "GET", "v2/groups/{group_id}/products",
        docs="groups#list-all-products-within-group"),
    _ep("groups_get_product", "GET", "v2/groups/{group_id}/products/{product_id}",
        docs="groups#list-specific-product-within-group"),

    # --- Invoices ---
    _ep("invoices_list_all", "GET", "v2/invoices", docs="invoices-v2#list-all-invoices"),
    _ep("invoices_create", "POST", "v2/invoices", True, "invoices-v2#create-an-invoice"),
    _ep("invoices_get", "GET", "v2/invoices/{invoice_id}", docs="invoices-v2#retrieve-an-invoice"),
    _ep("invoices_checkout", "POST", "v2/invoices/{invoice_id}/checkout",
        docs="invoices-v2#create-a-checkout-session"),
    _ep("invoices_get_items", "GET", "v2/invoices/{invoice_id}/deliverables",
        docs="invoices-v2#view-invoice-deliverables"),
    _ep("invoices_mark_completed", "PATCH", "v2/invoices/{invoice_id}/mark-completed",
        docs="invoices-v2#mark-pending-invoice-completed"),
    _ep("invoices_mark_voided", "PATCH", "v2/invoices/{invoice_id}/mark-voided",
        docs="invoices-v2#mark-pending-invoice-voided"),
    _ep("invoices_issue_replacement", "PATCH", "v2/invoices/{invoice_id}/issue-replacement", True,
        "invoices-v2#issue-replacement-for-completed-invoice"),

    # --- Products ---
    _ep("products_list_all", "GET", "v2/products", docs="products-v2#list-all-products"),
    _ep("products_create", "POST", "v2/products", True, "products-v2#create-a-product"),
    _ep("products_get", "GET", "v2/products/{product_id}", docs="products-v2#retrieve-a-product"),
    _ep("products_update", "PATCH", "v2/products/{product_id}", True, "products-v2#update-a-product"),
    _ep("products_delete", "DELETE", "v2/products/{product_id}", docs="products-v2#delete-a-product"),

    # --- Product variants ---
    _ep("variants_list_all", "GET", "v2/products/{product_id}/variants",
        docs="product-variants-v2#list-all-product-variants"),
    _ep("variants_create", "POST", "v2/products/{product_id}/variants", True,
        "product-variants-v2#create-a-product-variant"),
    _ep("variants_get", "GET", "v2/products/{product_id}/variants/{variant_id}",
        docs="product-variants-v2#retrieve-a-product-variant"),
    _ep("variants_update", "PATCH", "v2/products/{product_id}/variants/{variant_id}", True,
        "product-variants-v2#update-a-product-variant"),
    _ep("variants_delete", "DELETE", "v2/products/{product_id}/variants/{variant_id}",
        docs="product-variants-v2#delete-a-product-variant"),

    # --- Sections ---
    _ep("sections_list_all", "GET", "v1/sections", docs="sections#list-all-sections"),
    _ep("sections_create", "POST", "v1/sections", True, "sections#create-a-section"),
    _ep("sections_get", "GET", "v1/sections/{section_id}", docs="sections#retrieve-a-section"),
    _ep("sections_update", "PATCH", "v1/sections/{section_id}", True, "sections#update-a-section"),
    _ep("sections_delete", "DELETE", "v1/sections/{section_id}", docs="sections#delete-a-section"),

    # --- Tickets ---
    _ep("tickets_list_all", "GET", "v1/tickets", docs="tickets#list-all-tickets"),
    _ep("tickets_get", "GET", "v1/tickets/{ticket_id}", docs="tickets#retrieve-specific-ticket"),
    _ep("tickets_list_messages", "GET", "v1/tickets/{ticket_id}/messages",
        docs="tickets#list-all-ticket-messages"),
    _ep("tickets_reply", "POST", "v1/tickets/{ticket_id}/messages", True, "tickets#reply-to-ticket"),
    _ep("tickets_get_message", "GET", "v1/tickets/{ticket_id}/messages/{msg_id}",
        docs="tickets#retrieve-specific-ticket-message"),
]

ENDPOINTS: Dict[str, Endpoint] = {ep.name: ep for ep in _TABLE}
