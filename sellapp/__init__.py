from typing import Any

from .client import _BaseClient, SellAppError, SellAppConfigError, SellAppTransportError
from .endpoints import ENDPOINTS, Endpoint
from .blacklists import BlacklistsMixin
from .coupons import CouponsMixin
from .feedback import FeedbackMixin
from .groups import GroupsMixin
from .invoices import InvoicesMixin
from .products import ProductsMixin
from .sections import SectionsMixin
from .tickets import TicketsMixin

# Public API class = mixins + base client
class SellAppAPI(
    BlacklistsMixin,
    CouponsMixin,
    FeedbackMixin,
    GroupsMixin,
    InvoicesMixin,
    ProductsMixin,
    SectionsMixin,
    TicketsMixin,
    _BaseClient,
):
    """
    Sell.app REST client. Every method returns the raw ``requests.Response``;
    4xx/5xx statuses are not raised, check ``status_code`` yourself.

    Example:
        api = SellAppAPI("your_api_key")
        resp = api.invoices_list_all("?limit=50&page=1")
        print(resp.status_code, resp.json())
    """
    pass


def init(api_key: str, **options: Any) -> SellAppAPI:
    """Create a client for the given API key; options go to SellAppAPI."""
    return SellAppAPI(api_key, **options)


__all__ = [
    "SellAppAPI",
    "SellAppError",
    "SellAppConfigError",
    "SellAppTransportError",
    "Endpoint",
    "ENDPOINTS",
    "init",
]
