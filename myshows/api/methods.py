"""Catalogue of the remote procedures exposed by the MyShows RPC endpoints.

Every method name is bound to the ``TypedDict`` describing its ``params``
object. The schemas are for static checking and introspection only: the
dispatcher never validates params, the server does.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Literal, Optional, TypedDict, Union, get_args

from myshows.api.enums import (
    EGender,
    EGenderVote,
    EList,
    EMovieStatus,
    EShowSources,
    EShowStatus,
)
from myshows.common.types import ApiVersion


MethodV2 = Literal[
    "profile.Get",
    "profile.Feed",
    "profile.Friends",
    "profile.Followers",
    "profile.Friendship",
    "profile.FriendsFeed",
    "profile.Shows",
    "profile.ShowStatuses",
    "profile.Episodes",
    "profile.Show",
    "profile.Episode",
    "profile.Achievements",
    "profile.Achievement",
    "profile.NewComments",
    "profile.NewNewsComments",
    "profile.NewCommentReplies",
    "profile.NewNewsCommentReplies",
    "profile.Counters",
    "profile.Settings",
    "profile.SaveSettings",
    "profile.EpisodeCommentsCount",
    "profile.EpisodeComments",
    "profile.NewsCommentsCount",
    "profile.NewsComments",
    "profile.MarkCommentsAsViewed",
    "shows.Get",
    "shows.Count",
    "shows.Filters",
    "shows.GetById",
    "shows.GetByExternalId",
    "shows.Search",
    "shows.SearchByFile",
    "shows.Ids",
    "shows.Episode",
    "shows.Genres",
    "shows.Top",
    "shows.EpisodeComments",
    "shows.ViewEpisodeComments",
    "shows.TrackEpisodeComments",
    "shows.VoteEpisodeComment",
    "shows.PostEpisodeComment",
    "shows.UpdateEpisodeComment",
    "shows.DeleteEpisodeComment",
    "shows.TranslateEpisodeComment",
    "lists.Episodes",
    "lists.AddEpisode",
    "lists.RemoveEpisode",
    "lists.Shows",
    "lists.AddShow",
    "lists.RemoveShow",
    "manage.SetShowStatus",
    "manage.RateShow",
    "manage.CheckEpisode",
    "manage.UnCheckEpisode",
    "manage.RateEpisode",
    "manage.RateEpisodesBulk",
    "manage.SyncEpisodes",
    "manage.SyncEpisodesDelta",
    "manage.MoveEpisodeDate",
    "users.Search",
    "users.Count",
    "users.Filters",
    "users.Follow",
    "users.UnFollow",
    "users.FiltersCounters",
    "notes.Get",
    "notes.Count",
    "notes.Save",
    "notes.Delete",
    "notes.Restore",
    "auth.Register",
    "auth.LoginByAppleID",
    "auth.UnlinkSocialProfile",
    "auth.LinkSocialProfile",
    "iap.ValidateReceiptIOS",
    "iap.ValidateReceiptAndroid",
    "site.Meta",
    "site.Counters",
    "site.ShowsPopular",
    "site.ShowsOnline",
    "site.ShowsOnlinePromo",
    "site.TopEpisodeComments",
    "site.PaymentTypes",
    "site.Products",
    "site.CreateProTransaction",
    "news.Get",
    "news.Count",
    "news.GetById",
    "news.Categories",
    "news.Comments",
    "news.ViewComments",
    "news.TrackComments",
    "news.VoteComment",
    "news.PostComment",
    "news.UpdateComment",
    "news.DeleteComment",
    "news.TranslateComment",
    "push.RegisterTokenIOS",
    "push.RegisterTokenAndroid",
    "push.RegisterTokenWeb",
    "push.SendTestAndroid",
    "push.SendTestIOS",
    "recommendation.Get",
    "recommendation.Reject",
    "recommendation.UndoReject",
]

MethodV3 = Literal[
    "manage.SetMovieStatus",
    "movies.GetCatalog",
    "movies.GetById",
    "profile.UnwatchedMovies",
    "profile.UnwatchedMoviesFilters",
    "profile.UnwatchedMoviesCount",
    "profile.WatchedMovies",
    "profile.WatchedMoviesFilters",
    "profile.WatchedMoviesCount",
]

Method = Union[MethodV2, MethodV3]

METHODS_V2: FrozenSet[str] = frozenset(get_args(MethodV2))
METHODS_V3: FrozenSet[str] = frozenset(get_args(MethodV3))
METHODS: FrozenSet[str] = METHODS_V2 | METHODS_V3

Rating = Literal[1, 2, 3, 4, 5]


# ---------------------------------------------------------------------------
# Parameter schemas
# ---------------------------------------------------------------------------

class EmptyParams(TypedDict):
    pass


class IdParams(TypedDict):
    id: int


class LoginParams(TypedDict):
    login: str


class ShowIdParams(TypedDict):
    showId: int


class EpisodeIdParams(TypedDict):
    episodeId: int


class CommentIdParams(TypedDict):
    commentId: int


class NewsIdParams(TypedDict):
    newsId: int


class CountParams(TypedDict):
    count: int


class QueryParams(TypedDict):
    query: str


class ShowStatusesParams(TypedDict, total=False):
    showIds: List[int]


class AchievementsParams(TypedDict):
    login: str
    withPublic: bool


class AchievementParams(TypedDict):
    alias: str
    key: str


class SettingValue(TypedDict):
    alias: str
    value: str


class SaveSettingsParams(TypedDict):
    settings: List[SettingValue]


class CommentsPageParams(TypedDict):
    login: str
    page: int
    pageSize: int
    sort: str


class ShowSearch(TypedDict, total=False):
    network: int
    genre: int
    country: str
    year: int
    watching: int
    category: str
    status: str
    sort: str
    query: str


class ShowsGetParams(TypedDict, total=False):
    search: ShowSearch
    page: int
    pageSize: int


class ShowsSearchParams(TypedDict):
    search: ShowSearch


class ShowByIdParams(TypedDict):
    showId: int
    withEpisodes: bool


class ExternalIdParams(TypedDict):
    id: int
    source: EShowSources


class FileParams(TypedDict):
    file: str


class ShowIdsParams(TypedDict):
    fromId: int
    count: int


class TopParams(TypedDict):
    mode: EGenderVote
    count: int


class TrackEpisodeCommentsParams(TypedDict):
    episodeId: int
    isTracked: bool


class VoteCommentParams(TypedDict):
    commentId: int
    isPositive: bool


class PostEpisodeCommentParams(TypedDict, total=False):
    episodeId: int
    text: str
    image: str
    parentCommentId: int


class UpdateCommentParams(TypedDict, total=False):
    commentId: int
    text: str
    image: str
    deleteImage: bool


class TranslateCommentParams(TypedDict):
    commentId: int
    language: str


class ListParams(TypedDict):
    list: EList


class ListItemParams(TypedDict):
    id: int
    list: EList


class ShowStatusParams(TypedDict):
    id: int
    status: EShowStatus


class MovieStatusParams(TypedDict):
    movieId: int
    status: EMovieStatus


class RatingParams(TypedDict, total=False):
    id: int
    rating: Rating


class RateBulkParams(TypedDict):
    r1: List[int]
    r2: List[int]
    r3: List[int]
    r4: List[int]
    r5: List[int]


class SyncEpisodesParams(TypedDict):
    showId: int
    episodeIds: List[int]


class SyncEpisodesDeltaParams(TypedDict):
    showId: int
    checkedIds: List[int]
    unCheckedIds: List[int]


class MoveEpisodeDateParams(TypedDict):
    episodeId: int
    shiftDays: int


class UserSearch(TypedDict, total=False):
    query: str
    wasted: int
    year: int
    gender: EGender


class UsersSearchParams(TypedDict, total=False):
    search: UserSearch
    page: int
    pageSize: int


class UserSearchOnlyParams(TypedDict):
    search: UserSearch


class NotesSearch(TypedDict, total=False):
    isShow: bool
    isEpisode: bool


class NotesGetParams(TypedDict, total=False):
    search: NotesSearch
    page: int
    pageSize: int


class NotesCountParams(TypedDict):
    search: NotesSearch


class NotesSaveParams(TypedDict, total=False):
    showId: int
    text: str
    episodeId: int


class RegisterParams(TypedDict):
    clientId: str
    sig: str
    login: str
    email: str
    password: str


class AppleIdParams(TypedDict):
    clientId: str
    sig: str
    identityToken: str


class SocialProfileParams(TypedDict):
    provider: str


class LinkSocialProfileParams(TypedDict):
    provider: str
    returnUrl: str


class ReceiptIOSParams(TypedDict):
    receiptData: str
    transactionId: str
    isSandbox: bool


class ReceiptAndroidParams(TypedDict):
    payload: str


class SiteMetaParams(TypedDict):
    url: str


class TopEpisodeCommentsParams(TypedDict):
    episodeCount: int
    days: int


class ProTransactionParams(TypedDict):
    product: str
    paymentType: str


class NewsSearch(TypedDict, total=False):
    showId: int
    episodeId: int
    category: str
    tag: str
    isTrailer: bool
    similarNewsId: int
    forCurrentUser: bool


class NewsGetParams(TypedDict, total=False):
    search: NewsSearch
    page: int
    pageSize: int


class NewsCountParams(TypedDict):
    search: NewsSearch


class TrackNewsCommentsParams(TypedDict):
    newsId: int
    isTracked: bool


class PostNewsCommentParams(TypedDict, total=False):
    newsId: int
    text: str
    image: str
    parentCommentId: int


class PushTokenIOSParams(TypedDict):
    token: str
    idfa: str


class PushTokenAndroidParams(TypedDict):
    token: str
    gaid: str


class PushTokenWebParams(TypedDict):
    token: str


class PushTestParams(TypedDict):
    pushType: str


class MovieSearch(TypedDict, total=False):
    query: str
    year: int
    genre: int
    country: str
    sort: str


class MovieCatalogParams(TypedDict, total=False):
    search: MovieSearch
    page: int
    pageSize: int


class MovieSearchOnlyParams(TypedDict, total=False):
    search: MovieSearch


class MovieIdParams(TypedDict):
    movieId: int


METHOD_PARAMS: Dict[str, type] = {
    "profile.Get": LoginParams,
    "profile.Feed": LoginParams,
    "profile.Friends": LoginParams,
    "profile.Followers": LoginParams,
    "profile.Friendship": LoginParams,
    "profile.FriendsFeed": EmptyParams,
    "profile.Shows": LoginParams,
    "profile.ShowStatuses": ShowStatusesParams,
    "profile.Episodes": ShowIdParams,
    "profile.Show": ShowIdParams,
    "profile.Episode": EpisodeIdParams,
    "profile.Achievements": AchievementsParams,
    "profile.Achievement": AchievementParams,
    "profile.NewComments": EmptyParams,
    "profile.NewNewsComments": EmptyParams,
    "profile.NewCommentReplies": EmptyParams,
    "profile.NewNewsCommentReplies": EmptyParams,
    "profile.Counters": EmptyParams,
    "profile.Settings": EmptyParams,
    "profile.SaveSettings": SaveSettingsParams,
    "profile.EpisodeCommentsCount": LoginParams,
    "profile.EpisodeComments": CommentsPageParams,
    "profile.NewsCommentsCount": LoginParams,
    "profile.NewsComments": CommentsPageParams,
    "profile.MarkCommentsAsViewed": EmptyParams,
    "shows.Get": ShowsGetParams,
    "shows.Count": ShowsSearchParams,
    "shows.Filters": ShowsSearchParams,
    "shows.GetById": ShowByIdParams,
    "shows.GetByExternalId": ExternalIdParams,
    "shows.Search": QueryParams,
    "shows.SearchByFile": FileParams,
    "shows.Ids": ShowIdsParams,
    "shows.Episode": IdParams,
    "shows.Genres": EmptyParams,
    "shows.Top": TopParams,
    "shows.EpisodeComments": EpisodeIdParams,
    "shows.ViewEpisodeComments": EpisodeIdParams,
    "shows.TrackEpisodeComments": TrackEpisodeCommentsParams,
    "shows.VoteEpisodeComment": VoteCommentParams,
    "shows.PostEpisodeComment": PostEpisodeCommentParams,
    "shows.UpdateEpisodeComment": UpdateCommentParams,
    "shows.DeleteEpisodeComment": CommentIdParams,
    "shows.TranslateEpisodeComment": TranslateCommentParams,
    "lists.Episodes": ListParams,
    "lists.AddEpisode": ListItemParams,
    "lists.RemoveEpisode": ListItemParams,
    "lists.Shows": ListParams,
    "lists.AddShow": ListItemParams,
    "lists.RemoveShow": ListItemParams,
    "manage.SetShowStatus": ShowStatusParams,
    "manage.RateShow": RatingParams,
    "manage.CheckEpisode": RatingParams,
    "manage.UnCheckEpisode": IdParams,
    "manage.RateEpisode": RatingParams,
    "manage.RateEpisodesBulk": RateBulkParams,
    "manage.SyncEpisodes": SyncEpisodesParams,
    "manage.SyncEpisodesDelta": SyncEpisodesDeltaParams,
    "manage.MoveEpisodeDate": MoveEpisodeDateParams,
    "users.Search": UsersSearchParams,
    "users.Count": UserSearchOnlyParams,
    "users.Filters": UserSearchOnlyParams,
    "users.Follow": LoginParams,
    "users.UnFollow": LoginParams,
    "users.FiltersCounters": UserSearchOnlyParams,
    "notes.Get": NotesGetParams,
    "notes.Count": NotesCountParams,
    "notes.Save": NotesSaveParams,
    "notes.Delete": IdParams,
    "notes.Restore": IdParams,
    "auth.Register": RegisterParams,
    "auth.LoginByAppleID": AppleIdParams,
    "auth.UnlinkSocialProfile": SocialProfileParams,
    "auth.LinkSocialProfile": LinkSocialProfileParams,
    "iap.ValidateReceiptIOS": ReceiptIOSParams,
    "iap.ValidateReceiptAndroid": ReceiptAndroidParams,
    "site.Meta": SiteMetaParams,
    "site.Counters": EmptyParams,
    "site.ShowsPopular": CountParams,
    "site.ShowsOnline": CountParams,
    "site.ShowsOnlinePromo": CountParams,
    "site.TopEpisodeComments": TopEpisodeCommentsParams,
    "site.PaymentTypes": EmptyParams,
    "site.Products": EmptyParams,
    "site.CreateProTransaction": ProTransactionParams,
    "news.Get": NewsGetParams,
    "news.Count": NewsCountParams,
    "news.GetById": NewsIdParams,
    "news.Categories": EmptyParams,
    "news.Comments": NewsIdParams,
    "news.ViewComments": NewsIdParams,
    "news.TrackComments": TrackNewsCommentsParams,
    "news.VoteComment": VoteCommentParams,
    "news.PostComment": PostNewsCommentParams,
    "news.UpdateComment": UpdateCommentParams,
    "news.DeleteComment": CommentIdParams,
    "news.TranslateComment": TranslateCommentParams,
    "push.RegisterTokenIOS": PushTokenIOSParams,
    "push.RegisterTokenAndroid": PushTokenAndroidParams,
    "push.RegisterTokenWeb": PushTokenWebParams,
    "push.SendTestAndroid": PushTestParams,
    "push.SendTestIOS": PushTestParams,
    "recommendation.Get": CountParams,
    "recommendation.Reject": IdParams,
    "recommendation.UndoReject": IdParams,
    # v3
    "manage.SetMovieStatus": MovieStatusParams,
    "movies.GetCatalog": MovieCatalogParams,
    "movies.GetById": MovieIdParams,
    "profile.UnwatchedMovies": MovieCatalogParams,
    "profile.UnwatchedMoviesFilters": MovieSearchOnlyParams,
    "profile.UnwatchedMoviesCount": MovieSearchOnlyParams,
    "profile.WatchedMovies": MovieCatalogParams,
    "profile.WatchedMoviesFilters": MovieSearchOnlyParams,
    "profile.WatchedMoviesCount": MovieSearchOnlyParams,
}


def api_version_for(method: str) -> Optional[ApiVersion]:
    """Return which endpoint serves ``method``, or ``None`` if it is unknown."""

    if method in METHODS_V3:
        return "v3"
    if method in METHODS_V2:
        return "v2"

    return None


def param_keys(method: str) -> List[str]:
    schema = METHOD_PARAMS.get(method)
    if schema is None:
        return []

    return list(getattr(schema, "__annotations__", {}).keys())


def methods_by_namespace(version: Optional[ApiVersion] = None) -> Dict[str, List[str]]:
    """Group method names by their ``namespace.`` prefix, sorted."""

    if version == "v2":
        pool = METHODS_V2
    elif version == "v3":
        pool = METHODS_V3
    else:
        pool = METHODS

    grouped: Dict[str, List[str]] = {}
    for name in sorted(pool):
        namespace = name.split(".", 1)[0]
        grouped.setdefault(namespace, []).append(name)

    return grouped
