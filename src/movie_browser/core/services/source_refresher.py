"""Source refresher service implementation."""

from pathlib import Path
from typing import Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    RefreshError,
    find_latest_file,
    get_modified_time,
    resolve_path,
    safe_copy_file,
)
from ..interfaces import ISourceRefresher
from ..models import RefreshResult, RefreshSummary


class SourceRefresher(ISourceRefresher, LoggerMixin):
    """Copies the newest export of each source directory to its canonical file."""

    def __init__(self, config: Config):
        """Initialize source refresher.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._refresh_config = config.refresh
        self._base_path = config.collection.base_path

    def refresh(self, fail_if_empty: bool = False) -> RefreshSummary:
        """Refresh every configured source.

        Args:
            fail_if_empty: Raise instead of returning when no source produced a file.

        Returns:
            Summary with one result per configured source. ``success`` is False
            when no source produced a file.

        Raises:
            RefreshError: If ``fail_if_empty`` is set and nothing was copied.
        """
        summary = RefreshSummary()

        for source in self._refresh_config.sources:
            result = self.refresh_source(
                source.name,
                resolve_path(source.source_dir, self._base_path),
                resolve_path(source.target_file, self._base_path),
            )
            summary.results.append(result)

        if summary.success:
            self.logger.info(
                f"Refreshed {summary.refreshed_count}/{len(summary.results)} sources"
            )
        else:
            self.logger.error("No CSV file found in any source")
            if fail_if_empty:
                raise RefreshError("No CSV file found in any source", summary.results)

        return summary

    def refresh_source(self, name: str, source_dir: Path, target_file: Path) -> RefreshResult:
        """Copy the newest export of one directory to its target file.

        Args:
            name: Source display name.
            source_dir: Directory holding dated exports.
            target_file: Canonical file to write.

        Returns:
            Refresh result for this source.
        """
        result = RefreshResult(name=name, source_dir=source_dir, target_file=target_file)

        if not source_dir.is_dir():
            self.logger.warning(f"{name}: directory does not exist: {source_dir}")
            result.error = f"Directory does not exist: {source_dir}"
            return result

        latest = self.find_latest_export(source_dir)
        if latest is None:
            self.logger.warning(f"{name}: no {self._refresh_config.extension} file found")
            result.error = f"No {self._refresh_config.extension} file found"
            return result

        if not safe_copy_file(latest, target_file):
            self.logger.error(f"{name}: failed to copy {latest} to {target_file}")
            result.error = f"Failed to copy {latest.name} to {target_file}"
            return result

        result.copied_file = latest
        result.modified_at = get_modified_time(latest)
        self.logger.info(f"{name}: {latest.name} -> {target_file.name}")
        return result

    def find_latest_export(self, directory: Path) -> Optional[Path]:
        """Find the most recently modified export in a directory.

        Args:
            directory: Directory to scan (non-recursive).

        Returns:
            Path to the newest export, or None if there is none.
        """
        try:
            return find_latest_file(directory, self._refresh_config.extension)
        except OSError as e:
            self.logger.warning(f"Cannot list {directory}: {e}")
            return None
