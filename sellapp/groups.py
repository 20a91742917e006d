from __future__ import annotations

import requests

from .endpoints import Body, Id


class GroupsMixin:
    # --- Product groups (v2) ---
    def groups_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("groups_list_all", url_params=url_params)

    def groups_create(self, data: Body) -> requests.Response:
        return self._dispatch("groups_create", data=data)

    def groups_get(self, group_id: Id) -> requests.Response:
        return self._dispatch("groups_get", group_id=group_id)

    def groups_update(self, group_id: Id, data: Body) -> requests.Response:
        return self._dispatch("groups_update", data=data, group_id=group_id)

    def groups_delete(self, group_id: Id) -> requests.Response:
        return self._dispatch("groups_delete", group_id=group_id)

    # --- Group <-> product associations ---
    def groups_add_products(self, group_id: Id, data: Body) -> requests.Response:
        """``data`` lists the product IDs to attach."""
        return self._dispatch("groups_add_products", data=data, group_id=group_id)

    def groups_remove_products(self, group_id: Id, data: Body) -> requests.Response:
        """``data`` lists the product IDs to detach (sent as a DELETE body)."""
        return self._dispatch("groups_remove_products", data=data, group_id=group_id)

    def groups_list_products(self, group_id: Id, url_params: str = "") -> requests.Response:
        return self._dispatch("groups_list_products", url_params=url_params, group_id=group_id)

    def groups_get_product(self, group_id: Id, product_id: Id) -> requests.Response:
        return self._dispatch("groups_get_product", group_id=group_id, product_id=product_id)
