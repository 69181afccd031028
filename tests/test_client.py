"""Tests for the MyShows wrappers and the generic entry point."""

from __future__ import annotations

import pytest

from conftest import V2_RPC, V3_RPC, make_response, sent_call
from myshows.api.client import MyShows, pick_search_options
from myshows.api.enums import EGenderVote, EList, EMovieStatus, EShowStatus
from myshows.api.envelope import METHOD_NOT_FOUND
from myshows.common.types import is_error


def _rpc(transport, index=-1):
    wire = sent_call(transport, index)["json"]
    return wire["method"], wire["params"]


class TestPickSearchOptions:
    def test_keeps_known_keys(self):
        search = {"query": "foo", "year": 1990, "city": "Oslo", "gender": None}

        assert pick_search_options(search) == {"query": "foo", "year": 1990}

    def test_empty(self):
        assert pick_search_options(None) == {}


class TestScenarios:
    def test_server_error_object_survives_http_500(self, client, transport):
        transport.request.return_value = make_response(
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "Invalid params"}},
            status=500,
        )

        outcome = client.shows_search("x")

        assert outcome == {"error": {"code": -32602, "message": "Invalid params"}}

    def test_shows_get_by_id(self, client, transport):
        transport.request.return_value = make_response(
            {"jsonrpc": "2.0", "id": 1, "result": {"id": 42, "title": "Example"}}
        )

        outcome = client.shows_get_by_id(42)

        assert outcome["result"] == {"id": 42, "title": "Example"}
        assert outcome["showId"] == 42
        assert outcome["withEpisodes"] is True
        assert _rpc(transport) == ("shows.GetById", {"showId": 42, "withEpisodes": True})

    def test_users_count_error(self, client, transport):
        transport.request.return_value = make_response({"error": "bad_request"})

        outcome = client.users_count({"query": "foo"})

        assert outcome == {"error": "bad_request"}
        assert is_error(outcome)
        assert _rpc(transport) == ("users.Count", {"search": {"query": "foo"}})


class TestWrappers:
    @pytest.fixture(autouse=True)
    def _ok(self, transport):
        transport.request.return_value = make_response({"result": True})

    @pytest.mark.parametrize(
        "call, method, params",
        [
            (lambda c: c.lists_shows(), "lists.Shows", {"list": "favorites"}),
            (lambda c: c.lists_add_show(3), "lists.AddShow", {"id": 3, "list": "favorites"}),
            (lambda c: c.lists_remove_episode(9, EList.IGNORED), "lists.RemoveEpisode", {"id": 9, "list": "ignored"}),
            (lambda c: c.manage_set_show_status(3, EShowStatus.WATCHING), "manage.SetShowStatus", {"id": 3, "status": "watching"}),
            (lambda c: c.manage_check_episode(5), "manage.CheckEpisode", {"id": 5}),
            (lambda c: c.manage_check_episode(5, rating=4), "manage.CheckEpisode", {"id": 5, "rating": 4}),
            (lambda c: c.manage_rate_episodes_bulk(r5=[1, 2]), "manage.RateEpisodesBulk", {"r1": [], "r2": [], "r3": [], "r4": [], "r5": [1, 2]}),
            (lambda c: c.manage_sync_episodes_delta(1, [2], [3]), "manage.SyncEpisodesDelta", {"showId": 1, "checkedIds": [2], "unCheckedIds": [3]}),
            (lambda c: c.profile_get("bob"), "profile.Get", {"login": "bob"}),
            (lambda c: c.profile_episodes(8), "profile.Episodes", {"showId": 8}),
            (lambda c: c.shows_search("lost"), "shows.Search", {"query": "lost"}),
            (lambda c: c.shows_ids(100), "shows.Ids", {"fromId": 100, "count": 100}),
            (lambda c: c.shows_top(), "shows.Top", {"mode": "all", "count": 500}),
            (lambda c: c.shows_post_episode_comment(12, "great episode"), "shows.PostEpisodeComment", {"episodeId": 12, "text": "great episode"}),
            (lambda c: c.shows_vote_episode_comment(4, True), "shows.VoteEpisodeComment", {"commentId": 4, "isPositive": True}),
            (lambda c: c.users_search({"query": "al"}), "users.Search", {"search": {"query": "al"}, "page": 0, "pageSize": 100}),
            (lambda c: c.users_filters_counters(), "users.FiltersCounters", {"search": {}}),
        ],
    )
    def test_v2_wrappers(self, client, transport, call, method, params):
        call(client)

        assert sent_call(transport)["url"] == V2_RPC
        assert _rpc(transport) == (method, params)

    @pytest.mark.parametrize(
        "call, method, params",
        [
            (lambda c: c.movies_search("alien"), "movies.GetCatalog", {"search": {"query": "alien"}, "page": 0, "pageSize": 30}),
            (lambda c: c.movies_get_by_id(77), "movies.GetById", {"movieId": 77}),
            (lambda c: c.manage_set_movie_status(77, EMovieStatus.LATER), "manage.SetMovieStatus", {"movieId": 77, "status": "later"}),
            (lambda c: c.profile_watched_movies(), "profile.WatchedMovies", {"search": {}, "page": 0, "pageSize": 30}),
        ],
    )
    def test_v3_wrappers(self, client, transport, call, method, params):
        call(client)

        assert sent_call(transport)["url"] == V3_RPC
        assert _rpc(transport) == (method, params)

    def test_enum_params_serialize_as_values(self, client, transport):
        client.shows_top(EGenderVote.FEMALE)

        assert sent_call(transport)["json"]["params"]["mode"] == "f"


class TestGeneric:
    def test_routes_by_method_name(self, client, transport):
        transport.request.return_value = make_response({"result": {"id": 1}})

        client.generic("shows.Genres")
        client.generic("movies.GetById", {"movieId": 1})

        assert sent_call(transport, 0)["url"] == V2_RPC
        assert sent_call(transport, 1)["url"] == V3_RPC

    def test_unknown_method(self, client, transport):
        outcome = client.generic("shows.DoesNotExist", {})

        assert outcome["error"]["code"] == METHOD_NOT_FOUND
        transport.request.assert_not_called()

    def test_failure_never_raises(self, client, transport):
        transport.request.side_effect = OSError("network down")

        outcome = client.generic("shows.Genres")

        assert is_error(outcome)


class TestLifecycle:
    def test_context_manager_closes_transport(self, http, urls, transport):
        with MyShows(
            {"client_id": "a", "client_secret": "b", "username": "c", "password": "d"},
            http=http,
            url_manager=urls,
        ):
            pass

        transport.close.assert_called_once()
