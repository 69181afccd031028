"""Shared fixtures: a MyShows client wired to a mocked ``requests.Session``."""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional
from unittest.mock import MagicMock

import pytest
import requests

from myshows.api.client import MyShows
from myshows.network_handlers.session import HttpSession
from myshows.network_handlers.url_manager import URLManager

CREDENTIALS = {
    "client_id": "app-id",
    "client_secret": "app-secret",
    "username": "alice",
    "password": "hunter2",
}

V2_RPC = "https://api.myshows.me/v2/rpc/"
V3_RPC = "https://myshows.me/v3/rpc/"


def make_response(
    body: Any = None,
    *,
    status: int = 200,
    text: Optional[str] = None,
    set_cookies: Iterable[str] = (),
    url: str = V2_RPC,
) -> requests.Response:
    """Build a real :class:`requests.Response` with a canned body."""

    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp._content = (text if text is not None else json.dumps(body)).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"

    cookies = list(set_cookies)
    raw = MagicMock()
    raw.headers.getlist.return_value = cookies
    resp.raw = raw
    if cookies:
        resp.headers["Set-Cookie"] = ", ".join(cookies)

    return resp


def sent_call(transport: MagicMock, index: int = -1) -> dict:
    """Keyword arguments of one ``requests.Session.request`` call."""

    return transport.request.call_args_list[index].kwargs


@pytest.fixture
def transport() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def http(transport: MagicMock) -> HttpSession:
    return HttpSession(timeout=5, session=transport)


@pytest.fixture
def urls() -> URLManager:
    return URLManager()


@pytest.fixture
def client(http: HttpSession, urls: URLManager) -> MyShows:
    return MyShows(CREDENTIALS, http=http, url_manager=urls)
