from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from myshows.common.logging import get_logger

from .paths import expand_env, get_service_settings_path, read_json

log = get_logger(__name__)

AUTH_URL = "https://myshows.me/oauth/token"
AUTH_URL_V3 = "https://myshows.me/api/session"
BASE_URL_V2 = "https://api.myshows.me/v2/rpc/"
BASE_URL_V3 = "https://myshows.me/v3/rpc/"

DEFAULT_REQUEST_TIMEOUT = 20.0

# Used whenever the settings file is missing or incomplete.
_BUILTIN_SERVICES: Dict[str, Dict[str, Any]] = {
    "v2": {"base_url": BASE_URL_V2, "auth_url": AUTH_URL, "default_headers": {}},
    "v3": {"base_url": BASE_URL_V3, "auth_url": AUTH_URL_V3, "default_headers": {}},
}


def load_service_settings() -> Dict[str, Any]:
    path = get_service_settings_path()
    data = read_json(path)

    return expand_env(data)


try:  # pragma: no cover - guard against missing files at import time
    SERVICE_SETTINGS: Dict[str, Any] = load_service_settings()
except (OSError, ValueError) as exc:
    log.warning("Falling back to built-in MyShows endpoints: %s", exc)
    SERVICE_SETTINGS = {}


def _services() -> Dict[str, Any]:
    return SERVICE_SETTINGS.get("services", {}) if SERVICE_SETTINGS else {}


def list_service_configs() -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for name in _BUILTIN_SERVICES:
        result[name] = get_service_config(name) or {}

    return result


def get_service_config(service: str) -> Optional[Dict[str, Any]]:
    builtin = _BUILTIN_SERVICES.get(service)
    configured = _services().get(service)
    if builtin is None and configured is None:
        return None

    merged = dict(builtin or {})
    if isinstance(configured, Mapping):
        # empty strings come from unset ${VAR} tokens and must not shadow defaults
        merged.update({k: v for k, v in configured.items() if v not in (None, "")})

    return merged


def get_base_url(service: str) -> Optional[str]:
    cfg = get_service_config(service)
    if not cfg:
        return None

    return cfg.get("base_url")


def get_auth_url(service: str) -> Optional[str]:
    cfg = get_service_config(service)
    if not cfg:
        return None

    return cfg.get("auth_url")


def get_default_headers(service: str) -> Dict[str, str]:
    cfg = get_service_config(service) or {}
    headers = cfg.get("default_headers", {}) or {}

    return {k: str(expand_env(v)) for k, v in headers.items()} if headers else {}


def get_request_timeout() -> float:
    raw = SERVICE_SETTINGS.get("request_timeout") if SERVICE_SETTINGS else None
    try:
        timeout = float(raw) if raw not in (None, "") else DEFAULT_REQUEST_TIMEOUT
    except (TypeError, ValueError):
        log.warning("Ignoring invalid request_timeout %r", raw)
        return DEFAULT_REQUEST_TIMEOUT

    return timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT


def get_credentials() -> Dict[str, Optional[str]]:
    cfg = (SERVICE_SETTINGS.get("credentials") if SERVICE_SETTINGS else None) or {}

    return {
        "client_id": cfg.get("client_id") or None,
        "client_secret": cfg.get("client_secret") or None,
        "username": cfg.get("username") or None,
        "password": cfg.get("password") or None,
    }


__all__ = [
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
]
