"""Tests for the JSON-RPC dispatcher and response classification."""

from __future__ import annotations

import socket

import pytest
import requests

from conftest import V2_RPC, V3_RPC, make_response, sent_call
from myshows.api.auth import AuthSession
from myshows.api.dispatch import dispatch
from myshows.api.envelope import (
    DEFAULT_ENVELOPE,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TRANSPORT_ERROR,
    RequestEnvelope,
    auth_error_response,
    classify_response,
)


class TestClassifyResponse:
    def test_result_merges_over_params(self):
        body = {"jsonrpc": "2.0", "id": 1, "result": {"id": 42}}
        outcome = classify_response(body, {"showId": 42, "id": "mine"})

        assert outcome == {"showId": 42, "id": 1, "jsonrpc": "2.0", "result": {"id": 42}}

    def test_falsy_result_is_an_error(self):
        body = {"jsonrpc": "2.0", "id": 1, "result": [], "error": {"code": 5}}

        assert classify_response(body, {"a": 1}) == {"error": {"code": 5}}

    def test_missing_error_field_yields_none(self):
        assert classify_response({"jsonrpc": "2.0"}, {}) == {"error": None}

    def test_non_mapping_body(self):
        assert classify_response(["not", "an", "object"], {"a": 1}) == {"error": None}


class TestEnvelope:
    def test_with_call_leaves_template_untouched(self):
        derived = DEFAULT_ENVELOPE.with_call("shows.Genres", {"x": 1})

        assert derived.method == "shows.Genres"
        assert DEFAULT_ENVELOPE.method == ""
        assert DEFAULT_ENVELOPE.params == {}

    def test_wire_shape(self):
        wire = RequestEnvelope().with_call("users.Count", None).to_wire()

        assert wire == {"jsonrpc": "2.0", "method": "users.Count", "params": {}, "id": 1}

    def test_auth_error_prefers_description(self):
        body = {"error": "invalid_grant", "error_description": "Bad credentials"}

        assert auth_error_response(400, body) == {
            "error": {"code": 400, "message": "Bad credentials"}
        }

    def test_auth_error_without_body(self):
        assert auth_error_response(502, None) == {
            "error": {"code": 502, "message": "authentication failed"}
        }


class TestDispatch:
    def test_success_echoes_params(self, transport, http, urls):
        transport.request.return_value = make_response(
            {"jsonrpc": "2.0", "id": 1, "result": {"id": 42, "title": "Example"}}
        )

        outcome = dispatch("shows.GetById", {"showId": 42, "withEpisodes": True}, http, urls, "v2")

        assert outcome["result"] == {"id": 42, "title": "Example"}
        assert outcome["showId"] == 42
        assert outcome["withEpisodes"] is True

    def test_request_body_and_target(self, transport, http, urls):
        transport.request.return_value = make_response({"result": 1})

        dispatch("shows.Genres", None, http, urls, "v2")

        call = sent_call(transport)
        assert call["method"] == "POST"
        assert call["url"] == V2_RPC
        assert call["json"] == {"jsonrpc": "2.0", "method": "shows.Genres", "params": {}, "id": 1}
        assert call["timeout"] == 5

    def test_id_is_constant_across_calls(self, transport, http, urls):
        transport.request.return_value = make_response({"result": 1})

        dispatch("shows.Genres", None, http, urls, "v2")
        dispatch("users.Count", {"search": {}}, http, urls, "v2")

        ids = [c.kwargs["json"]["id"] for c in transport.request.call_args_list]
        assert ids == [1, 1]

    def test_v3_service_targets_v3_endpoint(self, transport, http, urls):
        transport.request.return_value = make_response({"result": {"id": 7}}, url=V3_RPC)

        dispatch("movies.GetById", {"movieId": 7}, http, urls, "v3")

        assert sent_call(transport)["url"] == V3_RPC

    def test_explicit_url_overrides_endpoint(self, transport, http, urls):
        transport.request.return_value = make_response({"result": 1})

        dispatch("shows.Genres", None, http, urls, "v2", url="https://example.test/rpc")

        assert sent_call(transport)["url"] == "https://example.test/rpc"

    def test_auth_headers_are_attached(self, transport, http, urls):
        transport.request.return_value = make_response({"result": 1})
        auth = AuthSession(version="v2", headers={"Authorization": "bearer t0k"}, token="t0k")

        dispatch("profile.Achievements", None, http, urls, "v2", auth=auth)

        headers = sent_call(transport)["headers"]
        assert headers["Authorization"] == "bearer t0k"
        assert headers["Accept"] == "application/json"

    def test_error_body_passes_through(self, transport, http, urls):
        transport.request.return_value = make_response({"error": "bad_request"})

        outcome = dispatch("users.Count", {"search": {"query": "foo"}}, http, urls, "v2")

        assert outcome == {"error": "bad_request"}

    def test_http_error_status_is_normalized(self, transport, http, urls):
        transport.request.return_value = make_response({"oops": True}, status=503)

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome["error"]["code"] == 503
        assert "503" in outcome["error"]["message"]

    @pytest.mark.parametrize("status", [400, 500])
    def test_rpc_error_in_rejected_reply_passes_through(self, transport, http, urls, status):
        rpc_error = {"code": -32602, "message": "Invalid params"}
        transport.request.return_value = make_response(
            {"jsonrpc": "2.0", "id": 1, "error": rpc_error}, status=status
        )

        outcome = dispatch("shows.Search", {"query": "x"}, http, urls, "v2")

        assert outcome == {"error": rpc_error}

    def test_html_error_page_keeps_status(self, transport, http, urls):
        transport.request.return_value = make_response(text="<html>Bad Gateway</html>", status=502)

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome["error"]["code"] == 502

    def test_unparsable_body(self, transport, http, urls):
        transport.request.return_value = make_response(text="<html>maintenance</html>")

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome["error"]["code"] == PARSE_ERROR

    @pytest.mark.parametrize(
        "exc",
        [
            requests.exceptions.Timeout("timed out"),
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.RequestException("boom"),
        ],
    )
    def test_transport_failure_never_raises(self, transport, http, urls, exc):
        transport.request.side_effect = exc

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome["error"]["code"] == TRANSPORT_ERROR
        assert outcome["error"]["message"]

    def test_dns_failure_is_reported(self, transport, http, urls):
        err = requests.exceptions.ConnectionError("resolve failed")
        err.__cause__ = socket.gaierror("Name or service not known")
        transport.request.side_effect = err

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome["error"]["code"] == TRANSPORT_ERROR
        assert "resolve failed" in outcome["error"]["message"]

    def test_unexpected_exception_is_contained(self, transport, http, urls):
        transport.request.side_effect = RuntimeError("socket exploded")

        outcome = dispatch("shows.Genres", None, http, urls, "v2")

        assert outcome == {"error": {"code": TRANSPORT_ERROR, "message": "socket exploded"}}

    def test_unknown_method_makes_no_request(self, transport, http, urls):
        outcome = dispatch("shows.Nope", {}, http, urls, "v2")

        assert outcome["error"]["code"] == METHOD_NOT_FOUND
        transport.request.assert_not_called()

    def test_caller_params_are_not_mutated(self, transport, http, urls):
        transport.request.return_value = make_response({"result": {"ok": True}})
        params = {"showId": 1}

        dispatch("shows.GetById", params, http, urls, "v2")

        assert params == {"showId": 1}
