"""MyShows client with one wrapper per remote procedure.

Each wrapper only names its method and shapes a params dict; the call itself
goes through :meth:`MyShowsCore._query` (v2) or :meth:`MyShowsCore._query_v3`
(v3). Results are the echoed params merged with the response body, or an
error value, exactly as :func:`myshows.api.dispatch.dispatch` returns them.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from myshows.api.core import MyShowsCore
from myshows.api.enums import EGenderVote, EList, EMovieStatus, EShowSources, EShowStatus
from myshows.common.types import RpcResponse

_SEARCH_OPTION_KEYS = ("query", "wasted", "year", "gender")


def pick_search_options(search: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Keep only the user search filters the service understands."""

    source = search or {}

    return {key: source[key] for key in _SEARCH_OPTION_KEYS if source.get(key) is not None}


class MyShows(MyShowsCore):
    """MyShows API client.

    Example::

        client = MyShows({"client_id": "...", "client_secret": "...",
                          "username": "...", "password": "..."})
        if client.login() is None:
            shows = client.lists_shows()
    """

    # ------------------------------------------------------------------
    # lists.*
    # ------------------------------------------------------------------
    def lists_shows(self, list: EList = EList.FAVORITES) -> RpcResponse:
        """Shows on one of the user's lists (requires authentication)."""

        return self._query("lists.Shows", {"list": list})

    def lists_add_show(self, id: int) -> RpcResponse:
        """Add a show to favorites (requires authentication)."""

        return self._query("lists.AddShow", {"id": id, "list": EList.FAVORITES})

    def lists_remove_show(self, id: int) -> RpcResponse:
        return self._query("lists.RemoveShow", {"id": id, "list": EList.FAVORITES})

    def lists_episodes(self, list: EList = EList.FAVORITES) -> RpcResponse:
        """Episodes on one of the user's lists (requires authentication)."""

        return self._query("lists.Episodes", {"list": list})

    def lists_add_episode(self, id: int, list: EList = EList.FAVORITES) -> RpcResponse:
        return self._query("lists.AddEpisode", {"id": id, "list": list})

    def lists_remove_episode(self, id: int, list: EList = EList.FAVORITES) -> RpcResponse:
        """Only the favorites and ignored lists accept removals."""

        return self._query("lists.RemoveEpisode", {"id": id, "list": list})

    # ------------------------------------------------------------------
    # manage.*
    # ------------------------------------------------------------------
    def manage_set_show_status(self, id: int, status: EShowStatus) -> RpcResponse:
        return self._query("manage.SetShowStatus", {"id": id, "status": status})

    def manage_set_movie_status(self, movie_id: int, status: EMovieStatus) -> RpcResponse:
        """v3 only; call :meth:`login_v3` first."""

        return self._query_v3("manage.SetMovieStatus", {"movieId": movie_id, "status": status})

    def manage_rate_show(self, id: int, rating: int) -> RpcResponse:
        """Rate a show, ``rating`` from 1 to 5 (the server validates it)."""

        return self._query("manage.RateShow", {"id": id, "rating": rating})

    def manage_check_episode(self, id: int, rating: Optional[int] = None) -> RpcResponse:
        """Mark an episode watched, optionally rating it at the same time."""

        params: Dict[str, Any] = {"id": id}
        if rating is not None:
            params["rating"] = rating

        return self._query("manage.CheckEpisode", params)

    def manage_uncheck_episode(self, id: int) -> RpcResponse:
        return self._query("manage.UnCheckEpisode", {"id": id})

    def manage_rate_episode(self, id: int, rating: int) -> RpcResponse:
        return self._query("manage.RateEpisode", {"id": id, "rating": rating})

    def manage_rate_episodes_bulk(
        self,
        r1: Sequence[int] = (),
        r2: Sequence[int] = (),
        r3: Sequence[int] = (),
        r4: Sequence[int] = (),
        r5: Sequence[int] = (),
    ) -> RpcResponse:
        """Rate many episodes at once; ``rN`` holds the episode ids rated ``N``."""

        return self._query(
            "manage.RateEpisodesBulk",
            {"r1": list(r1), "r2": list(r2), "r3": list(r3), "r4": list(r4), "r5": list(r5)},
        )

    def manage_sync_episodes(self, show_id: int, episode_ids: Sequence[int]) -> RpcResponse:
        """Replace the set of watched episodes of a show."""

        return self._query(
            "manage.SyncEpisodes", {"showId": show_id, "episodeIds": list(episode_ids)}
        )

    def manage_sync_episodes_delta(
        self,
        show_id: int,
        checked_ids: Sequence[int],
        unchecked_ids: Sequence[int],
    ) -> RpcResponse:
        return self._query(
            "manage.SyncEpisodesDelta",
            {
                "showId": show_id,
                "checkedIds": list(checked_ids),
                "unCheckedIds": list(unchecked_ids),
            },
        )

    def manage_move_episode_date(self, episode_id: int, shift_days: int) -> RpcResponse:
        return self._query(
            "manage.MoveEpisodeDate", {"episodeId": episode_id, "shiftDays": shift_days}
        )

    # ------------------------------------------------------------------
    # profile.*
    # ------------------------------------------------------------------
    def profile_get(self, login: str) -> RpcResponse:
        return self._query("profile.Get", {"login": login})

    def profile_feed(self, login: str) -> RpcResponse:
        return self._query("profile.Feed", {"login": login})

    def profile_friends(self, login: str) -> RpcResponse:
        return self._query("profile.Friends", {"login": login})

    def profile_followers(self, login: str) -> RpcResponse:
        return self._query("profile.Followers", {"login": login})

    def profile_friends_feed(self) -> RpcResponse:
        return self._query("profile.FriendsFeed")

    def profile_shows(self, login: str) -> RpcResponse:
        return self._query("profile.Shows", {"login": login})

    def profile_episodes(self, show_id: int) -> RpcResponse:
        """Watched episodes of a show (requires authentication)."""

        return self._query("profile.Episodes", {"showId": show_id})

    def profile_achievements(self) -> RpcResponse:
        return self._query("profile.Achievements")

    def profile_new_comments(self) -> RpcResponse:
        return self._query("profile.NewComments")

    def profile_watched_movies(
        self,
        search: Optional[Mapping[str, Any]] = None,
        page: int = 0,
        page_size: int = 30,
    ) -> RpcResponse:
        """v3 only; call :meth:`login_v3` first."""

        return self._query_v3(
            "profile.WatchedMovies",
            {"search": dict(search or {}), "page": page, "pageSize": page_size},
        )

    def profile_unwatched_movies(
        self,
        search: Optional[Mapping[str, Any]] = None,
        page: int = 0,
        page_size: int = 30,
    ) -> RpcResponse:
        """v3 only; call :meth:`login_v3` first."""

        return self._query_v3(
            "profile.UnwatchedMovies",
            {"search": dict(search or {}), "page": page, "pageSize": page_size},
        )

    # ------------------------------------------------------------------
    # shows.*
    # ------------------------------------------------------------------
    def shows_get_by_id(self, id: int, with_episodes: bool = True) -> RpcResponse:
        return self._query("shows.GetById", {"showId": id, "withEpisodes": with_episodes})

    def shows_get_by_external_id(self, id: int, source: EShowSources) -> RpcResponse:
        return self._query("shows.GetByExternalId", {"id": id, "source": source})

    def shows_search(self, query: str) -> RpcResponse:
        return self._query("shows.Search", {"query": query})

    def shows_search_by_file(self, file: str) -> RpcResponse:
        """Match a release file name (e.g. ``Show.S01E02.720p.mkv``) to a show."""

        return self._query("shows.SearchByFile", {"file": file})

    def shows_ids(self, from_id: int, count: int = 100) -> RpcResponse:
        """Show ids after ``from_id`` (exclusive); ``count`` is capped at 1000 server side."""

        return self._query("shows.Ids", {"fromId": from_id, "count": count})

    def shows_episode(self, id: int) -> RpcResponse:
        return self._query("shows.Episode", {"id": id})

    def shows_genres(self) -> RpcResponse:
        return self._query("shows.Genres")

    def shows_top(self, mode: EGenderVote = EGenderVote.ALL, count: int = 500) -> RpcResponse:
        return self._query("shows.Top", {"mode": mode, "count": count})

    def shows_view_episode_comments(self, id: int) -> RpcResponse:
        return self._query("shows.ViewEpisodeComments", {"episodeId": id})

    def shows_track_episode_comments(self, id: int, is_tracked: bool) -> RpcResponse:
        return self._query("shows.TrackEpisodeComments", {"episodeId": id, "isTracked": is_tracked})

    def shows_vote_episode_comment(self, id: int, is_positive: bool) -> RpcResponse:
        return self._query("shows.VoteEpisodeComment", {"commentId": id, "isPositive": is_positive})

    def shows_post_episode_comment(
        self,
        id: int,
        text: str,
        parent_id: Optional[int] = None,
    ) -> RpcResponse:
        """Comment on episode ``id``; ``text`` must be 5 to 2000 characters."""

        params: Dict[str, Any] = {"episodeId": id, "text": text}
        if parent_id is not None:
            params["parentCommentId"] = parent_id

        return self._query("shows.PostEpisodeComment", params)

    def shows_translate_episode_comment(self, id: int, language: str) -> RpcResponse:
        return self._query("shows.TranslateEpisodeComment", {"commentId": id, "language": language})

    # ------------------------------------------------------------------
    # users.*
    # ------------------------------------------------------------------
    def users_search(
        self,
        search: Optional[Mapping[str, Any]] = None,
        page: int = 0,
        page_size: int = 100,
    ) -> RpcResponse:
        """Matching users (no authentication needed); ``page_size`` max 100."""

        return self._query(
            "users.Search",
            {"search": pick_search_options(search), "page": page, "pageSize": page_size},
        )

    def users_count(self, search: Optional[Mapping[str, Any]] = None) -> RpcResponse:
        """Number of matching users; all users when ``search`` is empty."""

        return self._query("users.Count", {"search": pick_search_options(search)})

    def users_filters_counters(self, query: Optional[str] = None) -> RpcResponse:
        return self._query("users.FiltersCounters", {"search": pick_search_options({"query": query})})

    # ------------------------------------------------------------------
    # movies.* (v3)
    # ------------------------------------------------------------------
    def movies_search(self, query: str, page: int = 0, page_size: int = 30) -> RpcResponse:
        return self._query_v3(
            "movies.GetCatalog",
            {"search": {"query": query}, "page": page, "pageSize": page_size},
        )

    def movies_get_by_id(self, id: int) -> RpcResponse:
        return self._query_v3("movies.GetById", {"movieId": id})
