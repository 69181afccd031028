from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urljoin, urlparse

from myshows.config import settings


@dataclass(frozen=True)
class ServiceView:
    """Resolved endpoints of one API version."""

    name: str
    base_url: str
    auth_url: str
    default_headers: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_config(cls, name: str, cfg: Mapping[str, Any]) -> "ServiceView":
        headers = cfg.get("default_headers")
        if headers is None:
            headers = settings.get_default_headers(name)

        return cls(
            name=name,
            base_url=str(cfg.get("base_url") or ""),
            auth_url=str(cfg.get("auth_url") or ""),
            default_headers={key: str(value) for key, value in dict(headers).items()},
            raw=dict(cfg),
        )


class URLManager:
    """
    Resolves the RPC and auth endpoints of each API version ("v2", "v3") and
    the headers every request to it carries. Config driven, no network I/O.

    ``service_overrides`` patches individual keys per version, e.g. to point
    the v3 RPC endpoint at a local mock server.
    """

    def __init__(self, service_overrides: Optional[Mapping[str, Mapping[str, Any]]] = None):
        overrides = service_overrides or {}

        self._views: Dict[str, ServiceView] = {}
        for name, cfg in settings.list_service_configs().items():
            merged = {**cfg, **dict(overrides.get(name) or {})}
            self._views[name] = ServiceView.from_config(name, merged)

    def build(self, service: str, path: str = "") -> Tuple[str, Dict[str, str]]:
        """
        Return ``(url, headers)`` for a request to ``service``.

        An empty ``path`` targets the RPC endpoint itself, an absolute URL is
        used as is, anything else is joined onto the endpoint.
        """
        view = self._view(service)
        headers = dict(view.default_headers)

        if not path:
            return view.base_url, headers
        if urlparse(path).scheme:
            return path, headers

        root = view.base_url if view.base_url.endswith("/") else view.base_url + "/"

        return urljoin(root, path.lstrip("/")), headers

    def auth_url(self, service: str) -> str:
        return self._view(service).auth_url

    def base_url(self, service: str) -> str:
        return self._view(service).base_url

    def service_headers(self, service: str) -> Dict[str, str]:
        return dict(self._view(service).default_headers)

    def services(self) -> Tuple[str, ...]:
        return tuple(self._views)

    def _view(self, service: str) -> ServiceView:
        try:
            return self._views[service]
        except KeyError:
            raise ValueError(f"Unknown API version '{service}', expected one of {sorted(self._views)}") from None
