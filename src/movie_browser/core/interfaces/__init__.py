"""Core interfaces for dependency injection."""

from .collection_loader import ICollectionLoader
from .record_parser import IRecordParser
from .source_refresher import ISourceRefresher

__all__ = [
    "IRecordParser",
    "ICollectionLoader",
    "ISourceRefresher",
]
