"""Filesystem helpers for reshaping a materialized project.

All helpers let OSError propagate to the command boundary.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralReplacement:
    """Exact search/replace pair applied to a text file."""

    search: str
    replacement: str


def project_exists(path: Path) -> bool:
    """Return True if path is an existing directory."""
    return path.is_dir()


def replace_in_file(path: Path, edit: LiteralReplacement) -> bool:
    """Replace every occurrence of edit.search in the file.

    Returns:
        True if the search string was found, False if the file was left as is
    """
    existing = path.read_text(encoding="utf-8")
    if edit.search not in existing:
        logger.debug("Marker %r not found in %s", edit.search, path)
        return False

    path.write_text(existing.replace(edit.search, edit.replacement), encoding="utf-8")
    return True


def copy_stub(stubs_dir: Path, stub: str, destination: Path) -> None:
    """Overwrite destination with the bundled stub, creating parent directories."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(stubs_dir / stub, destination)
    logger.debug("Copied stub %s to %s", stub, destination)


def delete_matching_files(directory: Path, pattern: str) -> list[Path]:
    """Delete files under directory matching a glob pattern.

    Returns:
        The deleted paths, sorted
    """
    deleted = sorted(path for path in directory.glob(pattern) if path.is_file())
    for path in deleted:
        path.unlink()
    return deleted
