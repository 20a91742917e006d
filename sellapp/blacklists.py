from __future__ import annotations

import requests

from .endpoints import Body, Id


class BlacklistsMixin:
    # --- Blacklist rules (v1) ---
    def blacklist_list_all_rules(self, url_params: str = "") -> requests.Response:
        return self._dispatch("blacklist_list_all_rules", url_params=url_params)

    def blacklist_create_rule(self, data: Body) -> requests.Response:
        return self._dispatch("blacklist_create_rule", data=data)

    def blacklist_get_rule(self, rule_id: Id) -> requests.Response:
        return self._dispatch("blacklist_get_rule", rule_id=rule_id)

    def blacklist_update_rule(self, rule_id: Id, data: Body) -> requests.Response:
        return self._dispatch("blacklist_update_rule", data=data, rule_id=rule_id)

    def blacklist_delete_rule(self, rule_id: Id) -> requests.Response:
        return self._dispatch("blacklist_delete_rule", rule_id=rule_id)
