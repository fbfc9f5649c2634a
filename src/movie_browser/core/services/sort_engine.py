"""Sort engine: orders a filtered view by one column."""

from typing import Iterable, List

from ..models import MovieRecord, SortConfig, SortDirection


def sort_value(record: MovieRecord, key: str) -> str:
    """Comparison value of a record for a column, missing values sorting as ``""``."""
    value = record.get(key)
    return str(value) if value else ""


def sort_movies(records: Iterable[MovieRecord], sort_config: SortConfig) -> List[MovieRecord]:
    """Return a new list ordered by the configured column.

    Values are compared as plain strings, so numeric-looking columns such as
    ``Release Year`` sort lexicographically. Equal values keep their input order.

    Args:
        records: Filtered records. Not modified.
        sort_config: Sort key and direction. No key keeps the input order.

    Returns:
        Sorted copy of the records.
    """
    if not sort_config.key:
        return list(records)

    key = sort_config.key
    return sorted(
        records,
        key=lambda record: sort_value(record, key),
        reverse=sort_config.direction == SortDirection.DESC,
    )
