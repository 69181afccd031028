from __future__ import annotations

from typing import Any, Dict, Literal, Optional, TypedDict, Union

from pydantic import BaseModel, Field



LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

ApiVersion = Literal["v2", "v3"]

JsonObject = Dict[str, Any]


class ErrorPayload(TypedDict):
    code: Optional[int]
    message: str


class ErrorResponse(TypedDict):
    """Error-shaped value returned in place of a result.

    ``error`` is either a normalized :class:`ErrorPayload` or the server's own
    JSON-RPC error value passed through verbatim.
    """

    error: Union[ErrorPayload, Any]


# A successful call is the request params merged with the whole response body,
# so the only key guaranteed to be present is ``result``.
RpcResponse = JsonObject


class HttpResult(BaseModel):
    url: str
    status_code: int
    ok: bool
    elapsed_ms: int = Field(ge=0)


def is_error(response: Any) -> bool:
    """True when ``response`` is an error-shaped value rather than a result."""

    return isinstance(response, dict) and "error" in response and not response.get("result")
