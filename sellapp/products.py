from __future__ import annotations

import requests

from .endpoints import Body, Id


class ProductsMixin:
    # --- Products (v2) ---
    def products_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("products_list_all", url_params=url_params)

    def products_create(self, data: Body) -> requests.Response:
        """Create a product. Image uploads are not supported through this call."""
        return self._dispatch("products_create", data=data)

    def products_get(self, product_id: Id) -> requests.Response:
        return self._dispatch("products_get", product_id=product_id)

    def products_update(self, product_id: Id, data: Body) -> requests.Response:
        return self._dispatch("products_update", data=data, product_id=product_id)

    def products_delete(self, product_id: Id) -> requests.Response:
        return self._dispatch("products_delete", product_id=product_id)

    # --- Variants live under their product ---
    def variants_list_all(self, product_id: Id, url_params: str = "") -> requests.Response:
        return self._dispatch("variants_list_all", url_params=url_params, product_id=product_id)

    def variants_create(self, product_id: Id, data: Body) -> requests.Response:
        return self._dispatch("variants_create", data=data, product_id=product_id)

    def variants_get(self, product_id: Id, variant_id: Id) -> requests.Response:
        return self._dispatch("variants_get", product_id=product_id, variant_id=variant_id)

    def variants_update(self, product_id: Id, variant_id: Id, data: Body) -> requests.Response:
        return self._dispatch("variants_update", data=data, product_id=product_id, variant_id=variant_id)

    def variants_delete(self, product_id: Id, variant_id: Id) -> requests.Response:
        return self._dispatch("variants_delete", product_id=product_id, variant_id=variant_id)
