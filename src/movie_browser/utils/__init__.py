"""Utility functions and classes."""

from .exceptions import (
    ConfigurationError,
    MovieBrowserError,
    RefreshError,
    SourceUnavailableError,
)
from .file_utils import (
    find_latest_file,
    get_modified_time,
    is_hidden_file,
    resolve_path,
    safe_copy_file,
)
from .presentation import (
    AVAILABLE_COLUMNS,
    COLUMN_LABELS,
    FILM_RATINGS,
    LANGUAGE_FLAGS,
    column_label,
    external_link,
    format_cast,
    format_cell,
    format_languages,
    format_rating,
    format_runtime,
    format_votes,
    leading_genres,
    parse_cast,
    toggle_column,
    truncate_summary,
)

__all__ = [
    "MovieBrowserError",
    "ConfigurationError",
    "SourceUnavailableError",
    "RefreshError",
    "find_latest_file",
    "get_modified_time",
    "is_hidden_file",
    "resolve_path",
    "safe_copy_file",
    "AVAILABLE_COLUMNS",
    "COLUMN_LABELS",
    "FILM_RATINGS",
    "LANGUAGE_FLAGS",
    "column_label",
    "external_link",
    "format_cast",
    "format_cell",
    "format_languages",
    "format_rating",
    "format_runtime",
    "format_votes",
    "leading_genres",
    "parse_cast",
    "toggle_column",
    "truncate_summary",
]
