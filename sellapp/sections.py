from __future__ import annotations

import requests

from .endpoints import Body, Id


class SectionsMixin:
    def sections_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("sections_list_all", url_params=url_params)

    def sections_create(self, data: Body) -> requests.Response:
        return self._dispatch("sections_create", data=data)

    def sections_get(self, section_id: Id) -> requests.Response:
        return self._dispatch("sections_get", section_id=section_id)

    def sections_update(self, section_id: Id, data: Body) -> requests.Response:
        return self._dispatch("sections_update", data=data, section_id=section_id)

    def sections_delete(self, section_id: Id) -> requests.Response:
        return self._dispatch("sections_delete", section_id=section_id)
