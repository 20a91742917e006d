from __future__ import annotations

import requests

from .endpoints import Body, Id


class CouponsMixin:
    def coupons_list_all(self, url_params: str = "") -> requests.Response:
        """List coupons, e.g. url_params="?limit=50&with_trashed=false"."""
        return self._dispatch("coupons_list_all", url_params=url_params)

    def coupons_create(self, data: Body) -> requests.Response:
        return self._dispatch("coupons_create", data=data)

    def coupons_get(self, coupon_id: Id) -> requests.Response:
        return self._dispatch("coupons_get", coupon_id=coupon_id)

    def coupons_update(self, coupon_id: Id, data: Body) -> requests.Response:
        return self._dispatch("coupons_update", data=data, coupon_id=coupon_id)

    def coupons_delete(self, coupon_id: Id) -> requests.Response:
        return self._dispatch("coupons_delete", coupon_id=coupon_id)
