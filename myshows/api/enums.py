"""Enumerations accepted by the MyShows RPC methods."""

from __future__ import annotations

from enum import Enum, IntEnum


class EList(str, Enum):
    """User lists shows and episodes can be placed on."""

    FAVORITES = "favorites"
    IGNORED = "ignored"
    UNWATCHED = "unwatched"
    NEXT = "next"


class EGender(str, Enum):
    MALE = "m"
    FEMALE = "f"
    UNKNOWN = "x"


class EGenderVote(str, Enum):
    MALE = "m"
    FEMALE = "f"
    ALL = "all"


class ESpentTime(IntEnum):
    """Buckets for the ``wasted`` user search filter."""

    NONE = 1
    HOUR = 2
    DAY = 3
    WEEK = 4
    MONTH = 5
    YEAR = 6


class EShowSources(str, Enum):
    TVRAGE = "tvrage"
    TVMAZE = "tvmaze"
    THETVDB = "thetvdb"
    IMDB = "imdb"
    KINOPOISK = "kinopoisk"


class EShowStatus(str, Enum):
    WATCHING = "watching"
    LATER = "later"
    CANCELLED = "cancelled"
    REMOVE = "remove"


class EMovieStatus(str, Enum):
    FINISHED = "finished"
    LATER = "later"
    REMOVE = "remove"


__all__ = [
    "EGender",
    "EGenderVote",
    "EList",
    "EMovieStatus",
    "EShowSources",
    "EShowStatus",
    "ESpentTime",
]
