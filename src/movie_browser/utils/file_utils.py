"""File system utilities."""

import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional


def is_hidden_file(path: Path) -> bool:
    """Check if file is hidden.

    Args:
        path: Path to check.

    Returns:
        True if file is hidden.
    """
    # Unix-style hidden files (start with dot)
    if path.name.startswith("."):
        return True

    # Windows hidden files
    if os.name == "nt":
        try:
            import stat

            return bool(path.stat().st_file_attributes & stat.FILE_ATTRIBUTE_HIDDEN)
        except (AttributeError, OSError):
            pass

    return False


def get_modified_time(path: Path) -> datetime:
    """Get file modification time.

    Args:
        path: Path to file.

    Returns:
        Local modification time.

    Raises:
        OSError: If file cannot be accessed.
    """
    return datetime.fromtimestamp(path.stat().st_mtime)


def find_latest_file(directory: Path, extension: str) -> Optional[Path]:
    """Find the most recently modified file with an extension in a directory.

    Only the directory itself is scanned. Hidden files and files that cannot be
    accessed are skipped.

    Args:
        directory: Directory to scan.
        extension: File extension including the dot (e.g. ``.csv``).

    Returns:
        Path to the newest matching file, or None if there is none.

    Raises:
        OSError: If the directory cannot be listed.
    """
    latest: Optional[Path] = None
    latest_mtime = 0.0
    extension = extension.lower()

    for item in directory.iterdir():
        if item.suffix.lower() != extension or is_hidden_file(item):
            continue
        try:
            if not item.is_file():
                continue
            mtime = item.stat().st_mtime
        except OSError:
            continue
        if latest is None or mtime > latest_mtime:
            latest, latest_mtime = item, mtime

    return latest


def safe_copy_file(source: Path, target: Path) -> bool:
    """Safely copy file from source to target.

    Args:
        source: Source file path.
        target: Target file path.

    Returns:
        True if copy was successful.
    """
    try:
        # Ensure target directory exists
        target.parent.mkdir(parents=True, exist_ok=True)

        shutil.copy2(str(source), str(target))
        return True
    except (OSError, shutil.Error):
        return False


def resolve_path(location: str, base_path: Optional[str] = None) -> Path:
    """Resolve a relative path against a base directory.

    Args:
        location: Configured path, ``~`` is expanded.
        base_path: Directory for relative paths. The working directory if None.

    Returns:
        Resolved path. Absolute locations are returned unchanged.
    """
    path = Path(location).expanduser()
    if not path.is_absolute() and base_path:
        path = Path(base_path).expanduser() / path
    return path
