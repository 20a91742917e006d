from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from sellapp import SellAppAPI

from tests.fixtures import API_KEY, make_response


@pytest.fixture
def api():
    client = SellAppAPI(API_KEY)
    client.session.send = MagicMock(return_value=make_response())
    yield client
    client.close()


@pytest.fixture
def sent(api):
    """Returns the PreparedRequest of the single call made through ``api``."""
    def _last():
        assert api.session.send.call_count == 1
        return api.session.send.call_args.args[0]
    return _last
