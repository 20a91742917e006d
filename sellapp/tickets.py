from __future__ import annotations

import requests

from .endpoints import Body, Id


class TicketsMixin:
    # --- Tickets (v1) ---
    def tickets_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("tickets_list_all", url_params=url_params)

    def tickets_get(self, ticket_id: Id) -> requests.Response:
        return self._dispatch("tickets_get", ticket_id=ticket_id)

    # --- Ticket messages ---
    def tickets_list_messages(self, ticket_id: Id, url_params: str = "") -> requests.Response:
        return self._dispatch("tickets_list_messages", url_params=url_params, ticket_id=ticket_id)

    def tickets_reply(self, ticket_id: Id, data: Body) -> requests.Response:
        """Post a message to the ticket; ``data`` is the JSON message."""
        return self._dispatch("tickets_reply", data=data, ticket_id=ticket_id)

    def tickets_get_message(self, ticket_id: Id, msg_id: Id) -> requests.Response:
        return self._dispatch("tickets_get_message", ticket_id=ticket_id, msg_id=msg_id)
