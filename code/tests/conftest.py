"""Shared fixtures: small BIDS datasets written to tmp_path."""

import json
from pathlib import Path
from typing import Optional

import nibabel as nib
import numpy as np
import pytest

from bids_checker.models import FileRef


def write_nifti(
    path: Path,
    shape: tuple[int, ...] = (4, 4, 4),
    voxel: tuple[float, float, float] = (2.0, 2.0, 2.0),
    tr: Optional[float] = None,
    time_unit: str = "sec",
) -> Path:
    """Write a zero-filled NIfTI-1 image (gzipped when the name ends in .gz)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    image = nib.Nifti1Image(np.zeros(shape, dtype=np.int16), np.diag([*voxel, 1.0]))
    if len(shape) == 4:
        image.header.set_zooms((*voxel, tr if tr is not None else 1.0))
    image.header.set_xyzt_units("mm", time_unit)
    nib.save(image, str(path))
    return path


def write_text(path: Path, contents: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def write_json(path: Path, data: object) -> Path:
    return write_text(path, json.dumps(data))


def file_ref(root: Path, relative: str) -> FileRef:
    """Build a FileRef for a file below root (relative path with leading "/")."""
    path = root / relative.lstrip("/")
    size = path.stat().st_size if path.exists() else 0
    return FileRef(relative_path=relative, name=path.name, size=size, path=path)


@pytest.fixture
def bids_dataset(tmp_path: Path) -> Path:
    """A two-subject dataset with one T1w and one resting-state BOLD run each.

    Valid as written: no errors and, since it has no field maps, no warnings.
    """
    root = tmp_path / "ds"
    write_json(root / "dataset_description.json", {"Name": "Test", "BIDSVersion": "1.0.0"})
    write_text(root / "README", "Test dataset\n")
    write_text(root / "participants.tsv", "participant_id\tage\nsub-01\t30\nsub-02\tn/a\n")
    write_json(
        root / "task-rest_bold.json",
        {"TaskName": "rest", "RepetitionTime": 2.0, "SliceTiming": [0.0, 0.5, 1.0, 1.5]},
    )
    for subject in ("sub-01", "sub-02"):
        write_nifti(root / subject / "anat" / f"{subject}_T1w.nii.gz")
        write_nifti(
            root / subject / "func" / f"{subject}_task-rest_bold.nii.gz",
            shape=(4, 4, 4, 5),
            tr=2.0,
        )
    return root
