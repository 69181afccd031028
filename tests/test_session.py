"""Tests for the HTTP session wrapper and log helpers."""

from __future__ import annotations

import io
import json
import logging
from unittest.mock import patch

import pytest
import requests

from conftest import make_response
from myshows.common.logging import JsonFormatter, get_logger, init_logging, redact_headers
from myshows.network_handlers import session as net
from myshows.network_handlers.session import HttpSession, decode_json


class TestHttpSession:
    def test_single_attempt_per_call(self, transport, http):
        transport.request.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(net.TimeoutError):
            http.post("https://api.myshows.me/v2/rpc/", json_body={})

        assert transport.request.call_count == 1

    def test_passes_body_headers_and_timeout(self, transport, http):
        transport.request.return_value = make_response({"result": 1})

        resp = http.post("https://x.test/", json_body={"a": 1}, headers={"Accept": "application/json"})

        assert resp.status_code == 200
        transport.request.assert_called_once_with(
            method="POST",
            url="https://x.test/",
            headers={"Accept": "application/json"},
            json={"a": 1},
            timeout=5,
        )

    @pytest.mark.parametrize(
        "status, error",
        [
            (400, net.BadRequest),
            (401, net.Unauthorized),
            (403, net.Forbidden),
            (404, net.NotFound),
            (429, net.RateLimited),
            (502, net.Upstream5xx),
            (418, net.Client4xx),
        ],
    )
    def test_status_mapping(self, transport, http, status, error):
        transport.request.return_value = make_response({}, status=status)

        with pytest.raises(error) as info:
            http.post("https://x.test/")

        assert info.value.status == status
        assert info.value.response.status_code == status

    def test_allowed_status_is_returned(self, transport, http):
        transport.request.return_value = make_response({"error": "invalid_grant"}, status=400)

        resp = http.post("https://x.test/", allowed_statuses={400})

        assert resp.status_code == 400

    def test_connection_error(self, transport, http):
        transport.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(net.ConnectionFailed):
            http.post("https://x.test/")

    def test_caller_session_keeps_its_adapters(self, transport):
        HttpSession(timeout=1, session=transport)

        transport.mount.assert_not_called()

    def test_own_session_gets_pooled_adapters(self):
        with patch.object(net.requests, "Session") as factory:
            HttpSession(timeout=1)

        mounted = [c.args[0] for c in factory.return_value.mount.call_args_list]
        assert mounted == ["http://", "https://"]

    def test_transport_errors_carry_no_response(self, transport, http):
        transport.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(net.ConnectionFailed) as info:
            http.post("https://x.test/")

        assert info.value.response is None

    def test_default_timeout_from_settings(self, transport, monkeypatch):
        monkeypatch.setattr(net.settings, "get_request_timeout", lambda: 12.0)

        assert HttpSession(session=transport).timeout == 12.0

    def test_decode_json_rejects_html(self):
        with pytest.raises(net.InvalidResponse):
            decode_json(make_response(text="<html></html>", status=200))


class TestLogging:
    def test_redact_headers(self):
        redacted = redact_headers(
            {"Authorization": "bearer t", "authorization2": "Bearer t", "Cookie": "s=1", "Accept": "*/*"}
        )

        assert redacted == {
            "Authorization": "***",
            "authorization2": "***",
            "Cookie": "***",
            "Accept": "*/*",
        }

    def test_json_formatter_includes_extras(self):
        record = logging.LogRecord("myshows.test", logging.INFO, __file__, 1, "hello %s", ("bob",), None)
        record.method = "shows.Genres"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["msg"] == "hello bob"
        assert payload["level"] == "INFO"
        assert payload["method"] == "shows.Genres"
        assert "args" not in payload

    def test_init_logging_writes_json_lines(self):
        stream = io.StringIO()
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            init_logging("debug", stream=stream)
            get_logger("myshows.test").debug("ping")
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

        assert json.loads(stream.getvalue().splitlines()[-1])["msg"] == "ping"
