"""File system access: enumeration and content reading."""

from bids_checker.io.enumerator import DatasetNotFoundError, read_dir, relative_path
from bids_checker.io.reader import (
    FileReadError,
    NiftiHeader,
    NiftiHeaderError,
    read_file,
    read_nifti_header,
)

__all__ = [
    "DatasetNotFoundError",
    "FileReadError",
    "NiftiHeader",
    "NiftiHeaderError",
    "read_dir",
    "read_file",
    "read_nifti_header",
    "relative_path",
]
