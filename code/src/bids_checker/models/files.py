"""Dataset file reference model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRef(BaseModel):
    """A single file of the dataset being validated.

    Attributes:
        relative_path: POSIX path relative to the dataset root, with a leading "/"
                       (e.g., "/sub-01/anat/sub-01_T1w.nii.gz")
        name: Base name of the file
        size: Size in bytes (as reported by lstat)
        path: Absolute path used to read the content, None for synthetic
              references (e.g., a file expected but missing)
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., pattern=r"^/")
    name: str
    size: int = Field(default=0, ge=0)
    path: Optional[Path] = None

    @classmethod
    def missing(cls, relative_path: str) -> "FileRef":
        """Create a reference to a file that does not exist in the dataset."""
        return cls(relative_path=relative_path, name=relative_path.rsplit("/", 1)[-1])
