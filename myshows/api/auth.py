"""Credential handling and token exchange for both MyShows API versions.

The v2 API uses an OAuth password grant and expects ``Authorization: bearer``
on every RPC call. The v3 API uses a site session: the login response sets
cookies and returns a token that travels in the custom ``authorization2``
header. Either way, a successful login produces an immutable
:class:`AuthSession` describing the headers to attach; nothing here mutates
shared HTTP state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

import requests
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from myshows.api.envelope import PARSE_ERROR, TRANSPORT_ERROR, auth_error_response, error_response
from myshows.api.models import OAuthToken, SessionToken
from myshows.common.errors import ConfigError
from myshows.common.logging import get_logger
from myshows.common.types import ApiVersion, ErrorResponse
from myshows.config import settings
from myshows.network_handlers.session import HttpSession, InvalidResponse, NetError, decode_json
from myshows.network_handlers.url_manager import URLManager

log = get_logger(__name__)

PASSWORD_GRANT = "password"

# Auth endpoints report rejected credentials with these statuses and a JSON body.
_AUTH_REJECTION_STATUSES = frozenset({400, 401, 403})


class Credentials(BaseModel):
    """Long-lived account credentials; the grant type is always ``password``."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str
    username: str
    password: str
    grant_type: Literal["password"] = PASSWORD_GRANT

    @model_validator(mode="before")
    @classmethod
    def _force_password_grant(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            data = dict(data)
            data["grant_type"] = PASSWORD_GRANT
        return data

    @classmethod
    def from_settings(cls) -> "Credentials":
        values = settings.get_credentials()
        missing = sorted(k for k, v in values.items() if not v)
        if missing:
            raise ConfigError(
                "MyShows credentials are incomplete, missing: " + ", ".join(missing)
            )

        return cls.model_validate(values)

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, username={self.username!r})"

    __str__ = __repr__


@dataclass(frozen=True)
class AuthSession:
    """Headers that authenticate calls to one API version."""

    version: ApiVersion
    headers: Mapping[str, str] = field(repr=False)
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


LoginResult = Union[AuthSession, ErrorResponse]


class CredentialManager:
    """Exchanges :class:`Credentials` for per-version :class:`AuthSession` values."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        http: Optional[HttpSession] = None,
        urls: Optional[URLManager] = None,
    ) -> None:
        self._credentials = credentials
        self._http = http or HttpSession()
        self._urls = urls or URLManager()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def login(self) -> LoginResult:
        """OAuth password grant against the legacy endpoint."""

        outcome = self._post_credentials("v2", self._credentials.model_dump())
        if not isinstance(outcome, tuple):
            return outcome

        response, body = outcome
        if not isinstance(body, Mapping) or body.get("error") or not body.get("access_token"):
            log.warning("MyShows v2 login rejected (HTTP %s)", response.status_code)
            return auth_error_response(response.status_code, body)

        try:
            token = OAuthToken.model_validate(body)
        except ValidationError as exc:
            log.warning("MyShows v2 login returned an unexpected token payload")
            return error_response(response.status_code, str(exc))

        log.info("MyShows v2 login succeeded for %s", self._credentials.username)

        return AuthSession(
            version="v2",
            headers={"Authorization": f"bearer {token.access_token}"},
            token=token.access_token,
        )

    def login_v3(self) -> LoginResult:
        """Session login against the v3 site endpoint."""

        payload = {
            "login": self._credentials.username,
            "password": self._credentials.password,
        }
        outcome = self._post_credentials("v3", payload)
        if not isinstance(outcome, tuple):
            return outcome

        response, body = outcome
        if not isinstance(body, Mapping) or body.get("error") or not body.get("token"):
            log.warning("MyShows v3 login rejected (HTTP %s)", response.status_code)
            return auth_error_response(response.status_code, body)

        try:
            token = SessionToken.model_validate(body)
        except ValidationError as exc:
            log.warning("MyShows v3 login returned an unexpected token payload")
            return error_response(response.status_code, str(exc))

        log.info("MyShows v3 login succeeded for %s", self._credentials.username)

        return AuthSession(
            version="v3",
            headers={
                "Cookie": joined_set_cookie(response),
                "authorization2": f"Bearer {token.token}",
            },
            token=token.token,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _post_credentials(
        self, service: str, payload: Dict[str, Any]
    ) -> Union[Tuple[requests.Response, Any], ErrorResponse]:
        """POST ``payload`` to the auth endpoint and decode the reply."""

        try:
            url = self._urls.auth_url(service)
            headers = self._urls.service_headers(service)

            response = self._http.post(
                url,
                json_body=payload,
                headers=headers,
                allowed_statuses=_AUTH_REJECTION_STATUSES,
            )

            return response, decode_json(response)
        except InvalidResponse as exc:
            log.warning("MyShows %s login returned a body that is not JSON: %s", service, exc)
            return error_response(PARSE_ERROR, str(exc))
        except NetError as exc:
            log.warning("MyShows %s login failed: %s", service, exc)
            return error_response(exc.status if exc.status is not None else TRANSPORT_ERROR, str(exc))
        except Exception as exc:  # noqa: BLE001 - login never raises to the caller
            log.exception("MyShows %s login failed unexpectedly", service)
            return error_response(TRANSPORT_ERROR, str(exc) or exc.__class__.__name__)


def joined_set_cookie(response: requests.Response) -> str:
    """All ``Set-Cookie`` values of ``response`` joined by ``;`` ("" if none)."""

    raw_headers = getattr(getattr(response, "raw", None), "headers", None)
    getlist = getattr(raw_headers, "getlist", None)
    if callable(getlist):
        values = [str(v) for v in getlist("Set-Cookie") or ()]
    else:
        single = response.headers.get("Set-Cookie")
        values = [single] if single else []

    return ";".join(values)
