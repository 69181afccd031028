from __future__ import annotations

from typing import Any, Collection, Dict, Mapping, Optional
import socket
import time

import requests
from requests.adapters import HTTPAdapter

from myshows.common.errors import NetworkError
from myshows.common.logging import get_logger, redact_headers
from myshows.common.types import HttpResult
from myshows.config import settings

log = get_logger(__name__)



# ---------------- Exceptions ----------------

class NetError(NetworkError):
    # the rejected reply, set for HTTP status errors only
    response: Optional[requests.Response] = None


class TimeoutError(NetError): ...
class DNSFailure(NetError): ...
class ConnectionFailed(NetError): ...
class InvalidResponse(NetError): ...
class BadRequest(NetError): ...
class Unauthorized(NetError): ...
class Forbidden(NetError): ...
class NotFound(NetError): ...
class RateLimited(NetError): ...
class Upstream5xx(NetError): ...
class Client4xx(NetError): ...


def _map_http_error(status: int) -> NetError:
    if status == 400: return BadRequest("400 Bad Request", status=status)
    if status == 401: return Unauthorized("401 Unauthorized", status=status)
    if status == 403: return Forbidden("403 Forbidden", status=status)
    if status == 404: return NotFound("404 Not Found", status=status)
    if status == 429: return RateLimited("429 Too Many Requests", status=status)
    if 500 <= status < 600: return Upstream5xx(f"{status} Upstream error", status=status)

    return Client4xx(f"{status} HTTP error", status=status)


def decode_json(response: requests.Response) -> Any:
    """Parse a response body as JSON, raising :class:`InvalidResponse` otherwise."""

    try:
        return response.json()
    except ValueError as exc:
        raise InvalidResponse(
            f"Response from {response.url or 'server'} is not valid JSON",
            status=response.status_code,
        ) from exc


# ---------------- Main Session ----------------

class HttpSession:
    """
    Central HTTP client shared by both API versions:
      - pooled connections via ``requests.Session``
      - exactly one attempt per call, no retries or backoff
      - configured default timeout
      - typed error mapping for statuses the caller did not allow

    Holds no authentication state; auth headers are passed per call.
    """

    def __init__(self, timeout: Optional[float] = None, *, session: Optional[requests.Session] = None):
        self.timeout = timeout if timeout is not None else settings.get_request_timeout()

        if session is not None:
            # caller-owned sessions keep their own adapters
            self._session = session
        else:
            self._session = requests.Session()
            self._session.mount("http://", HTTPAdapter(pool_connections=4, pool_maxsize=16))
            self._session.mount("https://", HTTPAdapter(pool_connections=4, pool_maxsize=16))

    # -------- public API --------

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        allowed_statuses: Optional[Collection[int]] = None,
    ) -> requests.Response:

        return self._request(
            "POST",
            url,
            json_body=json_body,
            headers=headers,
            allowed_statuses=allowed_statuses,
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------- internals --------

    def _request(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        allowed_statuses: Optional[Collection[int]] = None,
    ) -> requests.Response:

        hdrs = dict(headers or {})
        allowed = set(allowed_statuses or ())
        started = time.monotonic()

        log.debug("http_request %s %s headers=%s", method, url, redact_headers(hdrs))

        try:
            resp = self._session.request(
                method=method,
                url=url,
                headers=hdrs,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TimeoutError(str(e)) from e
        except requests.exceptions.ConnectionError as e:
            if _caused_by_dns(e):
                raise DNSFailure(str(e)) from e
            raise ConnectionFailed(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise NetError(str(e)) from e

        status = resp.status_code
        result = HttpResult(
            url=url,
            status_code=status,
            ok=status < 400 or status in allowed,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )
        log.debug("http_response %s", result.model_dump())

        if result.ok:
            return resp

        err = _map_http_error(status)
        err.response = resp
        raise err


def _caused_by_dns(exc: BaseException) -> bool:
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, socket.gaierror):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__

    return False
