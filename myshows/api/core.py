"""Client core: authentication state plus the generic RPC entry point."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from myshows.api.auth import AuthSession, CredentialManager, Credentials, LoginResult
from myshows.api.dispatch import dispatch
from myshows.api.envelope import DEFAULT_ENVELOPE, METHOD_NOT_FOUND, RequestEnvelope, error_response
from myshows.api.methods import Method, MethodV2, MethodV3, api_version_for
from myshows.common.logging import get_logger
from myshows.common.types import ApiVersion, ErrorResponse, RpcResponse
from myshows.network_handlers.session import HttpSession
from myshows.network_handlers.url_manager import URLManager


class MyShowsCore:
    """Holds credentials and the active session of each API version.

    ``login``/``login_v3`` replace the session for their version with a new
    immutable :class:`AuthSession`; calls made afterwards pick it up. A
    session obtained elsewhere (another account) can be passed per call.
    """

    def __init__(
        self,
        credentials: Union[Credentials, Mapping[str, Any]],
        *,
        http: Optional[HttpSession] = None,
        url_manager: Optional[URLManager] = None,
        envelope: RequestEnvelope = DEFAULT_ENVELOPE,
    ) -> None:
        self._log = get_logger(__name__)
        if not isinstance(credentials, Credentials):
            credentials = Credentials.model_validate(dict(credentials))

        self._http = http or HttpSession()
        self._urls = url_manager or URLManager()
        self._auth = CredentialManager(credentials, http=self._http, urls=self._urls)
        self.default_envelope = envelope
        self._sessions: Dict[str, AuthSession] = {}

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "MyShowsCore":
        return cls(Credentials.from_settings(), **kwargs)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self) -> Optional[ErrorResponse]:
        """Log in to the v2 API. Returns an error value on failure, else ``None``."""

        return self._activate(self._auth.login())

    def login_v3(self) -> Optional[ErrorResponse]:
        """Log in to the v3 API. Returns an error value on failure, else ``None``."""

        return self._activate(self._auth.login_v3())

    def authenticate(self) -> LoginResult:
        """Run the v2 login without activating it: a new session or the error value."""

        return self._auth.login()

    def authenticate_v3(self) -> LoginResult:
        return self._auth.login_v3()

    def session(self, version: ApiVersion = "v2") -> Optional[AuthSession]:
        return self._sessions.get(version)

    def logout(self, version: Optional[ApiVersion] = None) -> None:
        """Forget the active session of ``version`` (both when omitted). No remote call."""

        if version is None:
            self._sessions = {}
        else:
            self._sessions = {k: v for k, v in self._sessions.items() if k != version}

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MyShowsCore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # RPC
    # ------------------------------------------------------------------
    def generic(
        self,
        method: Method,
        params: Optional[Mapping[str, Any]] = None,
        *,
        session: Optional[AuthSession] = None,
    ) -> RpcResponse:
        """Call any catalogued method; the endpoint is picked from the method name.

        Method reference: https://api.myshows.me/shared/doc/
        """

        version = api_version_for(method)
        if version is None:
            self._log.warning("Unknown MyShows method %s", method)
            return error_response(METHOD_NOT_FOUND, f"Unknown method '{method}'")

        return self._dispatch(version, method, params, session=session)

    def _query(
        self,
        method: MethodV2,
        params: Optional[Mapping[str, Any]] = None,
        *,
        session: Optional[AuthSession] = None,
        url: str = "",
    ) -> RpcResponse:
        return self._dispatch("v2", method, params, session=session, url=url)

    def _query_v3(
        self,
        method: MethodV3,
        params: Optional[Mapping[str, Any]] = None,
        *,
        session: Optional[AuthSession] = None,
        url: str = "",
    ) -> RpcResponse:
        return self._dispatch("v3", method, params, session=session, url=url)

    def _dispatch(
        self,
        version: ApiVersion,
        method: str,
        params: Optional[Mapping[str, Any]],
        *,
        session: Optional[AuthSession] = None,
        url: str = "",
    ) -> RpcResponse:
        auth = session if session is not None else self._sessions.get(version)

        return dispatch(
            method,
            params,
            self._http,
            self._urls,
            version,
            auth=auth,
            template=self.default_envelope,
            url=url,
        )

    def _activate(self, outcome: Any) -> Optional[ErrorResponse]:
        if not isinstance(outcome, AuthSession):
            return outcome

        # rebind rather than mutate so in-flight calls keep the dict they read
        sessions = dict(self._sessions)
        sessions[outcome.version] = outcome
        self._sessions = sessions

        return None
