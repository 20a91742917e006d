from __future__ import annotations

import requests

from .endpoints import Body, Id


# Feedback = customer reviews left on completed invoices.
class FeedbackMixin:
    def feedback_list_all(self, url_params: str = "") -> requests.Response:
        return self._dispatch("feedback_list_all", url_params=url_params)

    def feedback_get(self, feedback_id: Id) -> requests.Response:
        return self._dispatch("feedback_get", feedback_id=feedback_id)

    def feedback_reply(self, feedback_id: Id, data: Body) -> requests.Response:
        """
        Reply to a review.
        ``data`` is the JSON reply, e.g. '{"reply": "Thanks!"}'.
        """
        return self._dispatch("feedback_reply", data=data, feedback_id=feedback_id)
