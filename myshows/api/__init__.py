"""MyShows JSON-RPC API: client, authentication and shared shapes."""

from __future__ import annotations

from .auth import AuthSession, CredentialManager, Credentials
from .client import MyShows, pick_search_options
from .core import MyShowsCore
from .dispatch import dispatch
from .enums import EGender, EGenderVote, EList, EMovieStatus, EShowSources, EShowStatus, ESpentTime
from .envelope import DEFAULT_ENVELOPE, RequestEnvelope
from .methods import METHOD_PARAMS, METHODS, METHODS_V2, METHODS_V3, Method, MethodV2, MethodV3

__all__ = [
    "AuthSession",
    "CredentialManager",
    "Credentials",
    "DEFAULT_ENVELOPE",
    "EGender",
    "EGenderVote",
    "EList",
    "EMovieStatus",
    "EShowSources",
    "EShowStatus",
    "ESpentTime",
    "METHODS",
    "METHODS_V2",
    "METHODS_V3",
    "METHOD_PARAMS",
    "Method",
    "MethodV2",
    "MethodV3",
    "MyShows",
    "MyShowsCore",
    "RequestEnvelope",
    "dispatch",
    "pick_search_options",
]
