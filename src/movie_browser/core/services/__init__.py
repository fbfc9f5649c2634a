"""Core service implementations."""

from .catalog import MovieCatalog
from .collection_loader import CollectionLoader
from .facet_extractor import extract_genres, split_values
from .filter_engine import filter_movies
from .record_parser import RecordParser
from .sort_engine import sort_movies
from .source_refresher import SourceRefresher

__all__ = [
    "RecordParser",
    "CollectionLoader",
    "SourceRefresher",
    "MovieCatalog",
    "extract_genres",
    "split_values",
    "filter_movies",
    "sort_movies",
]
