"""HTTP plumbing shared by both MyShows API versions."""

from __future__ import annotations

from .session import (
    ConnectionFailed,
    DNSFailure,
    HttpSession,
    InvalidResponse,
    NetError,
    TimeoutError,
    decode_json,
)
from .url_manager import ServiceView, URLManager

__all__ = [
    "ConnectionFailed",
    "DNSFailure",
    "HttpSession",
    "InvalidResponse",
    "NetError",
    "ServiceView",
    "TimeoutError",
    "URLManager",
    "decode_json",
]
