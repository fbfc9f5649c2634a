"""Source refresher interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..models import RefreshResult, RefreshSummary


class ISourceRefresher(ABC):
    """Interface for copying the newest exports into the canonical CSV files."""

    @abstractmethod
    def refresh(self, fail_if_empty: bool = False) -> RefreshSummary:
        """Refresh every configured source.

        Args:
            fail_if_empty: Raise instead of returning when no source produced a file.

        Returns:
            Summary with one result per configured source.

        Raises:
            RefreshError: If ``fail_if_empty`` is set and nothing was copied.
        """
        pass

    @abstractmethod
    def refresh_source(self, name: str, source_dir: Path, target_file: Path) -> RefreshResult:
        """Copy the newest export of one directory to its target file.

        Args:
            name: Source display name.
            source_dir: Directory holding dated exports.
            target_file: Canonical file to write.

        Returns:
            Refresh result for this source.
        """
        pass

    @abstractmethod
    def find_latest_export(self, directory: Path) -> Optional[Path]:
        """Find the most recently modified export in a directory.

        Args:
            directory: Directory to scan (non-recursive).

        Returns:
            Path to the newest export, or None if there is none.
        """
        pass
