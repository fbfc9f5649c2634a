"""Collection loader interface."""

from abc import ABC, abstractmethod

from ..models import MovieCollection, SourceLoadResult


class ICollectionLoader(ABC):
    """Interface for loading the unified movie collection."""

    @abstractmethod
    async def load(self) -> MovieCollection:
        """Retrieve and parse every configured source concurrently.

        Returns:
            Unified collection. Unavailable sources contribute no records.
        """
        pass

    @abstractmethod
    async def fetch_text(self, location: str, tag: str) -> str:
        """Retrieve the raw text of one source.

        Args:
            location: File path or http(s) URL.
            tag: Source tag, used in error reporting.

        Returns:
            Document text.

        Raises:
            SourceUnavailableError: If the source cannot be retrieved.
        """
        pass

    @abstractmethod
    async def load_source(self, location: str, tag: str) -> SourceLoadResult:
        """Retrieve and parse one source, mapping failures to an empty result.

        Args:
            location: File path or http(s) URL.
            tag: Source tag.

        Returns:
            Per-source load result.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass
