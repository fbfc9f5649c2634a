"""Source refresh result data models."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class RefreshResult(BaseModel):
    """Result of refreshing one canonical CSV file."""

    name: str = Field(..., description="Source name")
    source_dir: Path = Field(..., description="Directory that was scanned")
    target_file: Path = Field(..., description="Canonical file that was written")
    copied_file: Optional[Path] = Field(None, description="Newest export that was copied")
    modified_at: Optional[datetime] = Field(None, description="Modification time of the copy")
    error: Optional[str] = Field(None, description="Error message if refresh failed")

    @property
    def is_successful(self) -> bool:
        """Check if a file was copied."""
        return self.copied_file is not None and self.error is None


class RefreshSummary(BaseModel):
    """Summary of a refresh run."""

    results: List[RefreshResult] = Field(default_factory=list, description="Per-source results")

    @property
    def success(self) -> bool:
        """At least one source produced a file."""
        return any(result.is_successful for result in self.results)

    @property
    def refreshed_count(self) -> int:
        """Number of files copied."""
        return sum(1 for result in self.results if result.is_successful)
