from __future__ import annotations

import requests

API_KEY = "sk_test_123"


def make_response(status: int = 200, body: bytes = b"{}") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.headers["Content-Type"] = "application/json"
    return resp
