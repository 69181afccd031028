from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from myshows.api.auth import AuthSession
from myshows.api.envelope import (
    DEFAULT_ENVELOPE,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TRANSPORT_ERROR,
    RequestEnvelope,
    classify_response,
    error_response,
)
from myshows.api.methods import METHODS
from myshows.common.logging import get_logger
from myshows.network_handlers.session import HttpSession, InvalidResponse, NetError, decode_json
from myshows.network_handlers.url_manager import URLManager

log = get_logger(__name__)


def dispatch(
    method: str,
    params: Optional[Mapping[str, Any]],
    http: HttpSession,
    urls: URLManager,
    service: str,
    *,
    auth: Optional[AuthSession] = None,
    template: RequestEnvelope = DEFAULT_ENVELOPE,
    url: str = "",
) -> Dict[str, Any]:
    """Execute one JSON-RPC call against ``service`` and classify the outcome.

    ``url`` defaults to the service's RPC endpoint. Headers are the service
    defaults plus those of ``auth``. Never raises: transport failures come
    back as ``{"error": {"code": ..., "message": ...}}``.
    """

    call_params = dict(params or {})

    if method not in METHODS:
        log.warning("Refusing to dispatch unknown RPC method %s", method)
        return error_response(METHOD_NOT_FOUND, f"Unknown method '{method}'")

    try:
        target, headers = urls.build(service, url)
        if auth is not None:
            headers.update(auth.headers)

        envelope = template.with_call(method, call_params)
        log.debug("rpc_call %s via %s", method, service)

        response = http.post(target, json_body=envelope.to_wire(), headers=headers)
        body = decode_json(response)
    except InvalidResponse as exc:
        log.warning("rpc_invalid_body %s: %s", method, exc)
        return error_response(PARSE_ERROR, str(exc))
    except NetError as exc:
        log.warning("rpc_transport_error %s: %s", method, exc)
        return _http_error_outcome(exc)
    except Exception as exc:  # noqa: BLE001 - calls never raise to the caller
        log.exception("rpc_unexpected_error %s", method)
        return error_response(TRANSPORT_ERROR, str(exc) or exc.__class__.__name__)

    outcome = classify_response(body, call_params)
    if outcome.get("result"):
        log.debug("rpc_result %s", method)
    else:
        log.debug("rpc_error %s: %s", method, outcome.get("error"))

    return outcome


def _http_error_outcome(exc: NetError) -> Dict[str, Any]:
    """The server's JSON-RPC ``error`` when the rejected reply carries one."""

    if exc.response is not None:
        try:
            body = decode_json(exc.response)
        except InvalidResponse:
            body = None
        if isinstance(body, Mapping) and body.get("error"):
            return {"error": body["error"]}

    return error_response(exc.status if exc.status is not None else TRANSPORT_ERROR, str(exc))
