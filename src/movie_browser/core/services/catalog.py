"""Movie catalog: browsing state over a loaded collection."""

from typing import Any, Optional, Tuple

from ...infrastructure.logging import LoggerMixin
from ..models import FilterCriteria, MovieCollection, MovieRecord, SortConfig
from .facet_extractor import extract_genres
from .filter_engine import DEFAULT_LANGUAGE_TARGET, filter_movies
from .sort_engine import sort_movies


class MovieCatalog(LoggerMixin):
    """Holds the unified collection and the current filter and sort state.

    The collection is never modified. Filter criteria and sort configuration are
    immutable values that get replaced on every change, and the view is derived
    from (records, criteria, sort) each time it is read.
    """

    def __init__(
        self,
        records: Tuple[MovieRecord, ...],
        genres: Optional[Tuple[str, ...]] = None,
        language_target: str = DEFAULT_LANGUAGE_TARGET,
    ) -> None:
        """Initialize catalog.

        Args:
            records: Unified collection.
            genres: Precomputed genre facets. Extracted from the records if None.
            language_target: Language used by the language filter.
        """
        self._records = tuple(records)
        self._genres = tuple(genres) if genres is not None else tuple(extract_genres(self._records))
        self._language_target = language_target
        self._criteria = FilterCriteria()
        self._sort_config = SortConfig()

    @classmethod
    def from_collection(
        cls, collection: MovieCollection, language_target: str = DEFAULT_LANGUAGE_TARGET
    ) -> "MovieCatalog":
        """Create a catalog from a loader result."""
        return cls(collection.records, collection.genres, language_target)

    @property
    def records(self) -> Tuple[MovieRecord, ...]:
        """Unified collection."""
        return self._records

    @property
    def genres(self) -> Tuple[str, ...]:
        """Genre facets of the whole collection."""
        return self._genres

    @property
    def criteria(self) -> FilterCriteria:
        """Current filter criteria."""
        return self._criteria

    @property
    def sort_config(self) -> SortConfig:
        """Current sort configuration."""
        return self._sort_config

    @property
    def filtered(self) -> Tuple[MovieRecord, ...]:
        """Records matching the current criteria, in collection order."""
        return tuple(filter_movies(self._records, self._criteria, self._language_target))

    @property
    def view(self) -> Tuple[MovieRecord, ...]:
        """Filtered and sorted records."""
        return tuple(sort_movies(self.filtered, self._sort_config))

    def apply_filters(self, **changes: Any) -> Tuple[MovieRecord, ...]:
        """Update filter criteria and return the new view.

        Args:
            **changes: FilterCriteria fields to replace.
        """
        self._criteria = self._criteria.with_changes(**changes)
        self.logger.debug(f"Filters changed: {self._criteria}")
        return self.view

    def reset_filters(self) -> Tuple[MovieRecord, ...]:
        """Clear every filter criterion and return the new view."""
        self._criteria = FilterCriteria()
        return self.view

    def sort_by(self, key: str) -> Tuple[MovieRecord, ...]:
        """Select a sort column and return the new view.

        Selecting the current column again flips the direction.
        """
        self._sort_config = self._sort_config.toggled(key)
        self.logger.debug(f"Sort changed: {self._sort_config}")
        return self.view

    def find(self, title: str) -> Optional[MovieRecord]:
        """Find the first record in the current view with the given title.

        Args:
            title: Title to look up, compared case-insensitively after trimming.
        """
        wanted = title.strip().lower()
        for record in self.view:
            if record.title.strip().lower() == wanted:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)
