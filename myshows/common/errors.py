from __future__ import annotations

from typing import Optional



class MyShowsError(Exception):
    """Base for all MyShows client exceptions."""


class ConfigError(MyShowsError):
    """Configuration related issues."""


class NetworkError(MyShowsError):
    """Network/HTTP layer issues."""

    def __init__(self, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class RpcError(MyShowsError):
    """A JSON-RPC call that could not be turned into a result."""
