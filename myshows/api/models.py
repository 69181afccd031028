"""Typed views over the payloads returned by MyShows.

Responses are handed to callers as plain dicts; these models are an opt-in
layer for callers that want validated objects. Every model accepts unknown
fields since the service adds attributes without notice.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from myshows.api.enums import EMovieStatus
from myshows.common.errors import RpcError
from myshows.common.types import is_error

ModelT = TypeVar("ModelT", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ----------------------------------------------------------------------
# Authentication payloads
# ----------------------------------------------------------------------

class OAuthToken(_Payload):
    access_token: str
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None


class SessionToken(_Payload):
    token: str


# ----------------------------------------------------------------------
# Shows
# ----------------------------------------------------------------------

class ShowEpisode(_Payload):
    id: int
    title: Optional[str] = None
    show_id: Optional[int] = Field(default=None, alias="showId")
    season_number: Optional[int] = Field(default=None, alias="seasonNumber")
    episode_number: Optional[int] = Field(default=None, alias="episodeNumber")
    air_date: Optional[str] = Field(default=None, alias="airDate")
    air_date_utc: Optional[str] = Field(default=None, alias="airDateUTC")
    image: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    short_name: Optional[str] = Field(default=None, alias="shortName")
    comments_count: Optional[int] = Field(default=None, alias="commentsCount")
    is_special: Optional[int] = Field(default=None, alias="isSpecial")


class OuterLink(_Payload):
    title: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    url: Optional[str] = None


class Network(_Payload):
    id: int
    title: Optional[str] = None
    country: Optional[str] = None


class _TitleBase(_Payload):
    id: int
    title: str
    title_original: Optional[str] = Field(default=None, alias="titleOriginal")
    description: Optional[str] = None
    status: Optional[str] = None
    year: Optional[int] = None
    watching_total: Optional[int] = Field(default=None, alias="watchingTotal")
    voted: Optional[int] = None
    rating: Optional[float] = None
    runtime: Optional[int] = None
    image: Optional[str] = None
    genre_ids: List[int] = Field(default_factory=list, alias="genreIds")
    kinopoisk_id: Optional[int] = Field(default=None, alias="kinopoiskId")
    kinopoisk_rating: Optional[float] = Field(default=None, alias="kinopoiskRating")
    imdb_id: Optional[int] = Field(default=None, alias="imdbId")
    imdb_rating: Optional[float] = Field(default=None, alias="imdbRating")


class ShowModel(_TitleBase):
    started: Optional[str] = None
    ended: Optional[str] = None
    total_seasons: Optional[int] = Field(default=None, alias="totalSeasons")
    episodes: Optional[List[ShowEpisode]] = None
    country: Optional[str] = None
    country_title: Optional[str] = Field(default=None, alias="countryTitle")
    network: Optional[Network] = None
    online_links: List[OuterLink] = Field(default_factory=list, alias="onlineLinks")


# ----------------------------------------------------------------------
# Movies (v3)
# ----------------------------------------------------------------------

class MovieCountry(_Payload):
    alias: str
    title: Optional[str] = None


class MovieCompany(_Payload):
    id: int
    title: Optional[str] = None


class MovieModel(_TitleBase):
    countries: List[MovieCountry] = Field(default_factory=list)
    production_companies: List[MovieCompany] = Field(default_factory=list, alias="productionCompanies")
    release_date: Optional[str] = Field(default=None, alias="releaseDate")
    watched: Optional[int] = None
    runtime_text: Optional[str] = Field(default=None, alias="runtimeText")
    comments_total: Optional[int] = Field(default=None, alias="commentsTotal")


class UserMovie(_Payload):
    id: int
    watch_status: Optional[str] = Field(default=None, alias="watchStatus")
    rating: Optional[int] = None
    is_favorite: bool = Field(default=False, alias="isFavorite")
    note: Optional[str] = None
    watch_count: int = Field(default=0, alias="watchCount")


class MovieSearchModel(MovieModel):
    online_count: Optional[int] = Field(default=None, alias="onlineCount")
    user_movie: Optional[UserMovie] = Field(default=None, alias="userMovie")


class MovieSearch(_Payload):
    movie: MovieSearchModel
    audience: Optional[int] = None
    status: Optional[EMovieStatus] = None


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def parse_result(response: Mapping[str, Any], model: Type[ModelT]) -> Optional[ModelT]:
    """Validate the ``result`` of a successful response into ``model``.

    Returns ``None`` for error-shaped responses or results that do not fit.
    """

    if is_error(response) or not response.get("result"):
        return None
    try:
        return model.model_validate(response["result"])
    except ValidationError:
        return None


def require_result(response: Mapping[str, Any]) -> Any:
    """Return ``response["result"]`` or raise :class:`RpcError` with the error value."""

    if is_error(response) or not response.get("result"):
        raise RpcError(str(response.get("error")))

    return response["result"]


__all__ = [
    "MovieCompany",
    "MovieCountry",
    "MovieModel",
    "MovieSearch",
    "MovieSearchModel",
    "Network",
    "OAuthToken",
    "OuterLink",
    "SessionToken",
    "ShowEpisode",
    "ShowModel",
    "UserMovie",
    "parse_result",
    "require_result",
]
