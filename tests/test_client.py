from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

import sellapp
from sellapp import SellAppAPI, SellAppConfigError, SellAppError, SellAppTransportError

from tests.fixtures import API_KEY, make_response


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestConfig:
    def test_init_builds_client(self):
        api = sellapp.init(API_KEY, timeout=5)
        assert isinstance(api, SellAppAPI)
        assert api.timeout == 5
        assert api.base_url == "https://sell.app/api"

    def test_base_url_trailing_slash_is_normalized(self):
        api = SellAppAPI(API_KEY, base_url="https://staging.sell.app/api/")
        assert api.base_url == "https://staging.sell.app/api"

    def test_base_url_needs_scheme(self):
        with pytest.raises(SellAppConfigError, match="scheme"):
            SellAppAPI(API_KEY, base_url="sell.app/api")

    def test_empty_api_key(self):
        with pytest.raises(SellAppConfigError):
            SellAppAPI("")

    @pytest.mark.parametrize("key", ["clé", "abc\ndef", "abc\x00", "key\r\nX-Evil: 1"])
    def test_bad_api_key_fails_before_any_request(self, key):
        with patch.object(requests.Session, "send") as send:
            with pytest.raises(SellAppConfigError):
                SellAppAPI(key)
        send.assert_not_called()

    def test_bad_extra_header(self):
        with pytest.raises(SellAppConfigError, match="X-Trace"):
            SellAppAPI(API_KEY, headers={"X-Trace": "a\nb"})

    @pytest.mark.parametrize("headers", [
        {"X-Trace": " abc"},
        {"X:Bad": "v"},
        {1: "v"},
        {"X-Trace": 5},
        {"X-Café": "v"},
        {"Authorization": "Bearer\nX-Evil: 1"},
    ])
    def test_bad_client_header_fails_before_any_request(self, headers):
        with patch.object(requests.Session, "send") as send:
            with pytest.raises(SellAppConfigError):
                SellAppAPI(API_KEY, headers=headers)
        send.assert_not_called()

    def test_config_error_is_a_value_error(self):
        assert issubclass(SellAppConfigError, ValueError)
        assert issubclass(SellAppConfigError, SellAppError)

    def test_repr_hides_api_key(self):
        assert API_KEY not in repr(SellAppAPI(API_KEY))

    def test_owned_session_never_retries(self):
        api = SellAppAPI(API_KEY)
        adapter = api.session.get_adapter("https://sell.app/api/")
        assert adapter.max_retries.total == 0


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


class TestHeaders:
    def test_extra_headers_are_sent(self):
        api = SellAppAPI(API_KEY, headers={"X-Trace": "abc"})
        api.session.send = MagicMock(return_value=make_response())
        api.coupons_get("c1")
        req = api.session.send.call_args.args[0]
        assert req.headers["X-Trace"] == "abc"

    def test_authorization_cannot_be_overridden(self):
        api = SellAppAPI(API_KEY, headers={"authorization": "Basic nope", "Accept": "text/plain"})
        api.session.send = MagicMock(return_value=make_response())
        api.coupons_get("c1")
        req = api.session.send.call_args.args[0]
        assert req.headers["Authorization"] == f"Bearer {API_KEY}"
        # per-request Accept still wins over client-wide headers
        assert req.headers["Accept"] == "application/json"

    def test_session_authorization_does_not_leak(self):
        session = requests.Session()
        session.headers["Authorization"] = "Bearer other"
        api = SellAppAPI(API_KEY, session=session)
        api.session.send = MagicMock(return_value=make_response())
        api.groups_get("42")
        req = api.session.send.call_args.args[0]
        assert req.headers["Authorization"] == f"Bearer {API_KEY}"

    def test_session_content_type_is_dropped_without_body(self):
        session = requests.Session()
        session.headers["Content-Type"] = "application/json"
        api = SellAppAPI(API_KEY, session=session)
        api.session.send = MagicMock(return_value=make_response())
        api.invoices_checkout("inv_1")
        req = api.session.send.call_args.args[0]
        assert req.method == "POST"
        assert "Content-Type" not in req.headers
        assert req.headers["Authorization"] == f"Bearer {API_KEY}"

    def test_client_content_type_is_dropped_without_body(self):
        api = SellAppAPI(API_KEY, headers={"content-type": "application/json"})
        api.session.send = MagicMock(return_value=make_response())
        api.groups_delete("42")
        req = api.session.send.call_args.args[0]
        assert "Content-Type" not in req.headers

    def test_body_keeps_content_type_with_session_override(self):
        session = requests.Session()
        session.headers["Content-Type"] = "text/plain"
        api = SellAppAPI(API_KEY, session=session)
        api.session.send = MagicMock(return_value=make_response())
        api.groups_create('{"title": "g"}')
        req = api.session.send.call_args.args[0]
        assert req.headers["Content-Type"] == "application/json"

    def test_header_merge_skips_authorization(self, api):
        headers = api._headers({"Authorization": "x", "Accept": "application/json"})
        assert headers["authorization"] == f"Bearer {API_KEY}"
        assert headers["Accept"] == "application/json"

    def test_non_ascii_body_is_sent_as_utf8(self, api, sent):
        api.tickets_reply("t1", '{"message": "merci, déjà fait"}')
        assert sent().body == '{"message": "merci, déjà fait"}'.encode("utf-8")

    def test_bytes_body_is_sent_as_is(self, api, sent):
        api.coupons_create(b'{"code":"X"}')
        assert sent().body == b'{"code":"X"}'


# ---------------------------------------------------------------------------
# Responses and failures
# ---------------------------------------------------------------------------


class TestResponses:
    def test_error_status_is_returned(self, api):
        api.session.send.return_value = make_response(404, b'{"message": "Not found"}')
        resp = api.groups_get("missing")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Not found"}

    def test_server_error_is_returned_once(self, api):
        api.session.send.return_value = make_response(503, b"")
        resp = api.invoices_list_all()
        assert resp.status_code == 503
        assert api.session.send.call_count == 1

    def test_body_is_not_parsed(self, api):
        api.session.send.return_value = make_response(200, b"not json")
        assert api.products_list_all().content == b"not json"

    def test_connection_failure_is_wrapped(self, api):
        api.session.send.side_effect = requests.exceptions.ConnectionError("connection refused")
        with pytest.raises(SellAppTransportError) as excinfo:
            api.invoices_get("inv_1")
        err = excinfo.value
        assert err.method == "GET"
        assert err.url == "https://sell.app/api/v2/invoices/inv_1"
        assert isinstance(err.__cause__, requests.exceptions.ConnectionError)
        assert api.session.send.call_count == 1

    def test_timeout_is_wrapped(self, api):
        api.session.send.side_effect = requests.exceptions.ReadTimeout("slow")
        with pytest.raises(SellAppTransportError):
            api.tickets_get("t1")

    def test_timeout_is_forwarded(self):
        api = SellAppAPI(API_KEY, timeout=2.5)
        api.session.send = MagicMock(return_value=make_response())
        api.sections_get("s1")
        assert api.session.send.call_args.kwargs["timeout"] == 2.5

    def test_missing_body_is_rejected(self, api):
        with pytest.raises(TypeError):
            api._dispatch("coupons_create")
        api.session.send.assert_not_called()

    def test_requests_are_logged_without_the_key(self, api, caplog):
        with caplog.at_level(logging.DEBUG, logger="sellapp.client"):
            api.coupons_create('{"code": "SECRET10"}')
        assert "POST https://sell.app/api/v1/coupons" in caplog.text
        assert API_KEY not in caplog.text
        assert "SECRET10" not in caplog.text


# ---------------------------------------------------------------------------
# Session ownership
# ---------------------------------------------------------------------------


class TestSession:
    def test_context_manager_closes_owned_session(self):
        api = SellAppAPI(API_KEY)
        with patch.object(api.session, "close") as close:
            with api as entered:
                assert entered is api
        close.assert_called_once()

    def test_close_owned_session(self):
        api = SellAppAPI(API_KEY)
        with patch.object(api.session, "close") as close:
            api.close()
        close.assert_called_once()

    def test_shared_session_is_left_open(self):
        session = requests.Session()
        api = SellAppAPI(API_KEY, session=session)
        with patch.object(session, "close") as close:
            api.close()
        close.assert_not_called()
        assert api.session is session
