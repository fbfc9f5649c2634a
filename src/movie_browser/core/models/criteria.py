"""Filter and sort state models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class LanguageFilter(str, Enum):
    """Language filter mode."""

    ANY = ""
    INCLUDES = "includes"
    EXCLUDES = "excludes"


class SortDirection(str, Enum):
    """Sort direction enumeration."""

    ASC = "asc"
    DESC = "desc"


class FilterCriteria(BaseModel):
    """Current combination of active filter predicates.

    Empty values disable the corresponding criterion.
    """

    search: str = Field(default="", description="Free-text search on titles and directors")
    genre: str = Field(default="", description="Genre token contained in the genres field")
    source: str = Field(default="", description="Exact source tag")
    language: LanguageFilter = Field(default=LanguageFilter.ANY, description="Language mode")
    film_rating: str = Field(default="", description="Exact age classification")

    model_config = ConfigDict(frozen=True)

    @property
    def search_term(self) -> str:
        """Normalized search term (trimmed, lower-cased)."""
        return self.search.strip().lower()

    @property
    def is_empty(self) -> bool:
        """Check whether no criterion is active."""
        return not (
            self.search_term
            or self.genre
            or self.source
            or self.language != LanguageFilter.ANY
            or self.film_rating
        )

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        """Return new criteria with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})


class SortConfig(BaseModel):
    """Sort key and direction of the current view."""

    key: Optional[str] = Field(default=None, description="Column to sort on")
    direction: SortDirection = Field(default=SortDirection.ASC, description="Sort direction")

    model_config = ConfigDict(frozen=True)

    def toggled(self, key: str) -> "SortConfig":
        """Return the configuration after selecting ``key``.

        Selecting the current key while ascending flips to descending; any
        other selection sorts ascending on ``key``.
        """
        if self.key == key and self.direction == SortDirection.ASC:
            return SortConfig(key=key, direction=SortDirection.DESC)
        return SortConfig(key=key, direction=SortDirection.ASC)
