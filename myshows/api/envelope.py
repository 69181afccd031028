"""JSON-RPC 2.0 request envelope and response classification."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from myshows.common.types import ErrorResponse, JsonObject

JSONRPC_VERSION = "2.0"

# Every request carries the same id; responses are never correlated by it.
REQUEST_ID = 1

# Codes used for failures that never produced a server-side error value.
PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
TRANSPORT_ERROR = -32000


class RequestEnvelope(BaseModel):
    """Immutable request template; ``with_call`` derives the per-call envelope."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = JSONRPC_VERSION
    method: str = ""
    params: Dict[str, Any] = Field(default_factory=dict)
    id: int = REQUEST_ID

    def with_call(self, method: str, params: Optional[Mapping[str, Any]]) -> "RequestEnvelope":
        return self.model_copy(update={"method": method, "params": dict(params or {})})

    def to_wire(self) -> JsonObject:
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": dict(self.params),
            "id": self.id,
        }


DEFAULT_ENVELOPE = RequestEnvelope()


def error_response(code: Optional[int], message: str) -> ErrorResponse:
    return {"error": {"code": code, "message": message}}


def auth_error_response(status: int, body: Any) -> ErrorResponse:
    """Normalize an OAuth-style rejection (``error``/``error_description``)."""

    payload = body if isinstance(body, Mapping) else {}
    message = payload.get("error_description") or payload.get("error") or "authentication failed"

    return error_response(status, str(message))


def classify_response(body: Any, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Turn a decoded response body into a success or error value.

    A truthy ``result`` makes the call a success: the request params are
    echoed back with every field of the body laid over them. Anything else is
    an error carrying the body's ``error`` value unchanged.
    """

    if isinstance(body, Mapping) and body.get("result"):
        merged: Dict[str, Any] = dict(params or {})
        merged.update(body)
        return merged

    error = body.get("error") if isinstance(body, Mapping) else None

    return {"error": error}
