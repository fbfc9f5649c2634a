"""Loaded collection data models."""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .movie import MovieRecord


class SourceLoadResult(BaseModel):
    """Outcome of loading one configured source."""

    tag: str = Field(..., description="Source tag")
    location: str = Field(..., description="Resolved source location")
    records: Tuple[MovieRecord, ...] = Field(default=(), description="Parsed records")
    error: str = Field(default="", description="Error message if the source was unavailable")

    model_config = ConfigDict(frozen=True)

    @property
    def available(self) -> bool:
        """Check if the source could be retrieved."""
        return not self.error


class MovieCollection(BaseModel):
    """Unified collection produced by the loader."""

    records: Tuple[MovieRecord, ...] = Field(default=(), description="All records, source order")
    genres: Tuple[str, ...] = Field(default=(), description="Sorted distinct genres")
    sources: Tuple[SourceLoadResult, ...] = Field(default=(), description="Per-source outcomes")
    ready: bool = Field(default=False, description="Whether every source reached a final state")

    model_config = ConfigDict(frozen=True)

    @property
    def source_counts(self) -> Dict[str, int]:
        """Number of records per source tag."""
        return {result.tag: len(result.records) for result in self.sources}

    @property
    def failed_sources(self) -> List[str]:
        """Tags of sources that could not be retrieved."""
        return [result.tag for result in self.sources if not result.available]

    def __len__(self) -> int:
        return len(self.records)
