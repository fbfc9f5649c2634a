"""Core data models."""

from .collection import MovieCollection, SourceLoadResult
from .criteria import FilterCriteria, LanguageFilter, SortConfig, SortDirection
from .movie import CastMember, MovieRecord
from .refresh_result import RefreshResult, RefreshSummary

__all__ = [
    "MovieRecord",
    "CastMember",
    "MovieCollection",
    "SourceLoadResult",
    "FilterCriteria",
    "LanguageFilter",
    "SortConfig",
    "SortDirection",
    "RefreshResult",
    "RefreshSummary",
]
