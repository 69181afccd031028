"""Public interfaces with lazy loading to keep ``import myshows`` cheap."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

__version__ = "0.3.0"

__all__ = [
    "AuthSession",
    "Credentials",
    "EGender",
    "EGenderVote",
    "EList",
    "EMovieStatus",
    "EShowSources",
    "EShowStatus",
    "ESpentTime",
    "MyShows",
    "MyShowsCore",
    "MyShowsError",
    "is_error",
]

_MODULE_EXPORTS = {
    "api": {
        "AuthSession",
        "Credentials",
        "EGender",
        "EGenderVote",
        "EList",
        "EMovieStatus",
        "EShowSources",
        "EShowStatus",
        "ESpentTime",
        "MyShows",
        "MyShowsCore",
    },
    "common.errors": {
        "MyShowsError",
    },
    "common.types": {
        "is_error",
    },
}

if TYPE_CHECKING:  # pragma: no cover - for static analysis only
    from .api import (
        AuthSession,
        Credentials,
        EGender,
        EGenderVote,
        EList,
        EMovieStatus,
        EShowSources,
        EShowStatus,
        ESpentTime,
        MyShows,
        MyShowsCore,
    )
    from .common.errors import MyShowsError
    from .common.types import is_error


def __getattr__(name: str) -> Any:
    for module_name, symbols in _MODULE_EXPORTS.items():
        if name in symbols:
            module = importlib.import_module(f"{__name__}.{module_name}")
            value = getattr(module, name)
            globals()[name] = value
            return value
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:
    exported = set(__all__)
    for symbols in _MODULE_EXPORTS.values():
        exported.update(symbols)
    exported.update(globals().keys())
    return sorted(exported)
