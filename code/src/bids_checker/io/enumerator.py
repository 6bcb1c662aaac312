"""Dataset file enumeration."""

import logging
import os
from pathlib import Path
from typing import Union

from bids_checker.models import FileRef

logger = logging.getLogger(__name__)


class DatasetNotFoundError(Exception):
    """Raised when the dataset root does not exist or is not a directory."""

    pass


def relative_path(root: Path, file_path: Path) -> str:
    """Return the dataset-relative POSIX path of a file, with a leading "/"."""
    return "/" + file_path.relative_to(root).as_posix()


def read_dir(root: Union[str, Path]) -> list[FileRef]:
    """List every file below a dataset root.

    Sizes come from lstat so broken symlinks (e.g., git-annex content that was
    not fetched) are still listed. Files are returned sorted by relative path.

    Args:
        root: Dataset root directory

    Returns:
        List of FileRef for all files in the tree

    Raises:
        DatasetNotFoundError: If root is not an existing directory
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise DatasetNotFoundError(f"Dataset directory not found: {root}")

    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            try:
                size = os.lstat(file_path).st_size
            except OSError as e:
                logger.warning(f"Could not stat {file_path}: {e}")
                size = 0
            files.append(
                FileRef(
                    relative_path=relative_path(root, file_path),
                    name=filename,
                    size=size,
                    path=file_path,
                )
            )

    logger.info(f"Found {len(files)} files in {root}")
    return sorted(files, key=lambda f: f.relative_path)
