"""Reading file contents and NIfTI headers."""

import logging
import zlib
from typing import Optional

import nibabel as nib
from nibabel.filebasedimages import ImageFileError
from nibabel.spatialimages import HeaderDataError
from pydantic import BaseModel

from bids_checker.models import FileRef, Issue

logger = logging.getLogger(__name__)

# Size of a NIfTI-1 header in bytes
NIFTI_HEADER_SIZE = 348
GZIP_MAGIC = b"\x1f\x8b"


class FileReadError(Exception):
    """Raised when a file cannot be read; carries the issue to report."""

    def __init__(self, issue: Issue):
        super().__init__(f"Unable to read {issue.relative_path}: {issue.evidence}")
        self.issue = issue


class NiftiHeaderError(Exception):
    """Raised when a NIfTI header cannot be decoded; carries the issue to report."""

    def __init__(self, issue: Issue):
        super().__init__(f"Unable to read NIfTI header of {issue.relative_path}")
        self.issue = issue


class NiftiHeader(BaseModel):
    """Fields of a NIfTI header used by validation.

    Attributes:
        dim: Data array dimensions; dim[0] is the number of dimensions
        pixdim: Grid spacings; pixdim[4] is the repetition time of 4D series
        xyzt_units: Spatial and temporal units (e.g., ("mm", "sec")); None
                    entries for units the header leaves unknown
    """

    dim: list[int]
    pixdim: list[float]
    xyzt_units: tuple[Optional[str], Optional[str]]

    @property
    def volume_count(self) -> int:
        """Number of volumes (1 for 3D images)."""
        if self.dim[0] >= 4:
            return self.dim[4]
        return 1


def read_file(file: FileRef) -> str:
    """Read a file as UTF-8 text.

    Args:
        file: File to read

    Returns:
        File contents

    Raises:
        FileReadError: If the file has no content handle, cannot be opened or
                       is not valid UTF-8
    """
    if file.path is None:
        raise FileReadError(Issue(code=44, file=file, evidence="no content available"))
    try:
        return file.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {file.relative_path}: {e}")
        raise FileReadError(Issue(code=44, file=file, evidence=str(e))) from e


def read_nifti_header(file: FileRef) -> NiftiHeader:
    """Read and decode the header of a NIfTI image.

    Args:
        file: NIfTI file (.nii or .nii.gz)

    Returns:
        Decoded header fields

    Raises:
        NiftiHeaderError: If the file is too small, claims to be gzipped but
                          is not, or the header cannot be parsed
    """
    if file.path is None:
        raise NiftiHeaderError(Issue(code=26, file=file, evidence="no content available"))

    try:
        with open(file.path, "rb") as f:
            magic = f.read(2)
        # FileRef.size comes from lstat; follow symlinks for the content size
        size = file.path.stat().st_size
    except OSError as e:
        raise NiftiHeaderError(Issue(code=44, file=file, evidence=str(e))) from e

    if file.name.endswith(".gz") and magic != GZIP_MAGIC:
        raise NiftiHeaderError(Issue(code=28, file=file))
    if not file.name.endswith(".gz") and size < NIFTI_HEADER_SIZE:
        raise NiftiHeaderError(
            Issue(code=36, file=file, evidence=f"file size is {size} bytes")
        )

    try:
        header = nib.load(str(file.path)).header
        spatial_unit, temporal_unit = header.get_xyzt_units()
        return NiftiHeader(
            dim=[int(value) for value in header["dim"]],
            pixdim=[float(value) for value in header["pixdim"]],
            xyzt_units=(_known_unit(spatial_unit), _known_unit(temporal_unit)),
        )
    except (ImageFileError, HeaderDataError, OSError, EOFError, ValueError, zlib.error) as e:
        logger.debug(f"Failed to parse NIfTI header of {file.relative_path}: {e}")
        raise NiftiHeaderError(Issue(code=26, file=file, evidence=str(e))) from e


def _known_unit(unit: str) -> Optional[str]:
    return None if unit == "unknown" else unit
