"""Custom exceptions for the application."""

from typing import Any, List, Optional


class MovieBrowserError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MovieBrowserError):
    """Configuration-related errors."""

    pass


class SourceUnavailableError(MovieBrowserError):
    """A configured collection source could not be retrieved."""

    def __init__(self, tag: str, location: str, reason: str):
        super().__init__(f"Source '{tag}' unavailable at {location}: {reason}")
        self.tag = tag
        self.location = location
        self.reason = reason


class RefreshError(MovieBrowserError):
    """Source refresh errors."""

    def __init__(self, message: str, results: Optional[List[Any]] = None):
        super().__init__(message)
        self.results = results or []
