from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

__all__ = [
    "AUTH_URL",
    "AUTH_URL_V3",
    "BASE_URL_V2",
    "BASE_URL_V3",
    "DEFAULT_REQUEST_TIMEOUT",
    "PATHS",
    "SERVICE_SETTINGS",
    "paths",
    "services",
    "expand_env",
    "get_auth_url",
    "get_base_url",
    "get_credentials",
    "get_default_headers",
    "get_request_timeout",
    "get_service_config",
    "get_service_settings_path",
    "list_service_configs",
    "load_service_settings",
]

_MODULE_EXPORTS = {
    "paths": {
        "PATHS",
        "expand_env",
        "get_service_settings_path",
    },
    "services": {
        "AUTH_URL",
        "AUTH_URL_V3",
        "BASE_URL_V2",
        "BASE_URL_V3",
        "DEFAULT_REQUEST_TIMEOUT",
        "SERVICE_SETTINGS",
        "get_auth_url",
        "get_base_url",
        "get_credentials",
        "get_default_headers",
        "get_request_timeout",
        "get_service_config",
        "list_service_configs",
        "load_service_settings",
    },
}

_SUBMODULE_NAMES = {"paths", "services"}

if TYPE_CHECKING:  # pragma: no cover - only for static analysis
    from . import paths, services
    from .paths import PATHS, expand_env, get_service_settings_path
    from .services import (
        AUTH_URL,
        AUTH_URL_V3,
        BASE_URL_V2,
        BASE_URL_V3,
        DEFAULT_REQUEST_TIMEOUT,
        SERVICE_SETTINGS,
        get_auth_url,
        get_base_url,
        get_credentials,
        get_default_headers,
        get_request_timeout,
        get_service_config,
        list_service_configs,
        load_service_settings,
    )


def __getattr__(name: str) -> Any:
    if name in _SUBMODULE_NAMES:
        module = importlib.import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    for module_name, symbols in _MODULE_EXPORTS.items():
        if name in symbols:
            module = importlib.import_module(f"{__name__}.{module_name}")
            value = getattr(module, name)
            # SERVICE_SETTINGS is looked up live so tests can swap it out
            if name != "SERVICE_SETTINGS":
                globals()[name] = value
            return value

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:
    exported = set(__all__)
    exported.update(_SUBMODULE_NAMES)
    for symbols in _MODULE_EXPORTS.values():
        exported.update(symbols)
    exported.update(globals().keys())
    return sorted(exported)
