from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import InvalidHeader
from requests.structures import CaseInsensitiveDict
from requests.utils import check_header_validity
from urllib3.util.retry import Retry

from .endpoints import ENDPOINTS

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sell.app/api"


class SellAppError(Exception):
    """Base class for errors raised by this client."""


class SellAppConfigError(SellAppError, ValueError):
    """Raised when the client is configured with an unusable value."""


class SellAppTransportError(SellAppError):
    """Raised when a request never produced an HTTP response."""
    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url


def _check_header(name: str, value: str) -> str:
    try:
        check_header_validity((name, value))
    except (InvalidHeader, TypeError, ValueError) as exc:
        raise SellAppConfigError(f"invalid header {name!r}: {exc}") from exc
    if not isinstance(name, str) or not isinstance(value, str):
        raise SellAppConfigError(f"header {name!r} must have a str name and value")
    # requests lets non-ASCII through; http.client would only reject it at send time
    for ch in name + value:
        if ch != "\t" and not (" " <= ch <= "~"):
            raise SellAppConfigError(f"header {name!r} contains an invalid character {ch!r}")
    return value


class _BaseClient:
    """
    Holds the API key, the shared session and the low-level _send()/_send_with_body().
    Resource mixins (coupons, invoices, etc.) subclass this.
    """
    def __init__(self,api_key: str,*,base_url: str = DEFAULT_BASE_URL,timeout: Optional[float] = None,headers: Optional[Mapping[str, str]] = None,session: Optional[requests.Session] = None,pool_connections: int = 10,pool_maxsize: int = 10,):
        if not api_key:
            raise SellAppConfigError("api_key must be a non-empty string")
        if not base_url.startswith("http"):
            raise SellAppConfigError("base_url must include scheme, e.g. https://sell.app/api")

        self._api_key = api_key
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout

        # Built once so a bad key or header fails here, not on the first call
        self._auth_value = _check_header("Authorization", f"Bearer {api_key}")
        self._extra_headers: Dict[str, str] = {}
        for name, value in (headers or {}).items():
            _check_header(name, value)
            if name.lower() == "authorization":
                continue
            self._extra_headers[name] = value

        if session is not None:
            self.session = session
            self._owns_session = False
        else:
            self.session = requests.Session()
            self._owns_session = True
            retry = Retry(
                total=0,
                read=False,
                redirect=False,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(
                pool_connections=pool_connections,
                pool_maxsize=pool_maxsize,
                max_retries=retry,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the session, unless it was handed in by the caller."""
        if self._owns_session:
            self.session.close()

    # --- Header construction ---
    def _headers(self, extra: Optional[Mapping[str, Optional[str]]] = None) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict({"Authorization": self._auth_value})
        for source in (self._extra_headers, extra or {}):
            for name, value in source.items():
                if name.lower() == "authorization":
                    continue
                headers[name] = value
        return headers

    # --- Low-level request primitives ---
    def _request(self, method: str, path: str, headers: CaseInsensitiveDict, data: Optional[bytes] = None) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("SellApp API %s %s", method, url)
        try:
            resp = self.session.request(method, url, headers=headers, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning("SellApp API %s %s failed: %s", method, url, exc)
            raise SellAppTransportError(
                f"SellApp API {method} {url} failed: {exc}",
                method=method,
                url=url,
            ) from exc
        logger.debug("SellApp API %s %s -> %s", method, url, resp.status_code)
        return resp

    def _send(self, path: str, method: str) -> requests.Response:
        # None makes requests drop Content-Type inherited from session.headers too
        headers = self._headers({"Accept": "application/json", "Content-Type": None})
        return self._request(method, path, headers)

    def _send_with_body(self, path: str, method: str, body: Union[str, bytes]) -> requests.Response:
        headers = self._headers({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })
        # Pre-serialized JSON; only turned into bytes, never re-encoded as JSON
        data = body.encode("utf-8") if isinstance(body, str) else body
        return self._request(method, path, headers, data=data)

    def _dispatch(self, name: str, *, data: Union[str, bytes, None] = None, url_params: str = "", **ids: Union[int, str]) -> requests.Response:
        endpoint = ENDPOINTS[name]
        path = endpoint.build_path(url_params=url_params, **ids)
        if endpoint.needs_body:
            if data is None:
                raise TypeError(f"{name}() requires a JSON body")
            return self._send_with_body(path, endpoint.method, data)
        return self._send(path, endpoint.method)
