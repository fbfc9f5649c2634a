"""Facet extraction over the unified collection."""

from typing import Iterable, List, Optional, Set

from ..models import MovieRecord


def split_values(value: Optional[str]) -> List[str]:
    """Split a comma-joined field into trimmed, non-empty tokens.

    Args:
        value: Raw field value.

    Returns:
        Tokens in field order.
    """
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def extract_genres(records: Iterable[MovieRecord]) -> List[str]:
    """Collect the distinct genres of a collection.

    Args:
        records: Records to scan.

    Returns:
        Sorted list of distinct genre tokens.
    """
    genres: Set[str] = set()
    for record in records:
        genres.update(split_values(record.genres))
    return sorted(genres)
