"""Validation of NIfTI images against their sidecars and companion files."""

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from bids_checker.io import NiftiHeader
from bids_checker.models import FileRef, Issue
from bids_checker.paths import inheritance_candidates, is_func_bold, parse_name
from bids_checker.validators.bvalues import parse_rows

logger = logging.getLogger(__name__)

# Fields needed for susceptibility distortion correction with field maps
FIELDMAP_FIELDS = [
    (6, "EchoTime"),
    (7, "PhaseEncodingDirection"),
    (8, "EffectiveEchoSpacing"),
    (9, "TotalReadoutTime"),
]
FIELDMAP_CORRECTABLE_SUFFIXES = {"bold", "sbref", "dwi"}

# Seconds per unit of the NIfTI temporal unit code
TIME_UNIT_SECONDS = {"sec": 1.0, "msec": 1e-3, "usec": 1e-6}
REPETITION_TIME_TOLERANCE = 1e-3


def validate_nifti(
    header: Optional[NiftiHeader],
    file: FileRef,
    json_by_path: Mapping[str, Optional[dict[str, Any]]],
    bfile_by_path: Mapping[str, str],
    files: Sequence[FileRef],
    events: Sequence[str],
) -> list[Issue]:
    """Validate a NIfTI image using its merged sidecar metadata and companions.

    Args:
        header: Decoded header, or None when header checks are disabled
        file: The NIfTI image
        json_by_path: Parsed JSON sidecars keyed by relative path
        bfile_by_path: Raw .bval/.bvec contents keyed by relative path
        files: All files of the dataset
        events: Relative paths of all events files

    Returns:
        Issues found for this image
    """
    path = file.relative_path
    if path.startswith(("/derivatives/", "/code/")):
        return []

    suffix = parse_name(file.name).suffix
    metadata = merged_sidecar(path, suffix, json_by_path)
    issues: list[Issue] = []

    if suffix == "bold" and is_func_bold(path):
        issues.extend(_check_bold(header, file, metadata, events))

    if suffix in FIELDMAP_CORRECTABLE_SUFFIXES:
        for code, field in FIELDMAP_FIELDS:
            if field not in metadata:
                issues.append(Issue(code=code, file=file, evidence=f"missing {field}"))

    if suffix == "dwi":
        existing = {f.relative_path for f in files}
        issues.extend(_check_gradients(header, file, bfile_by_path, existing))

    return issues


def merged_sidecar(
    path: str,
    suffix: str,
    json_by_path: Mapping[str, Optional[dict[str, Any]]],
) -> dict[str, Any]:
    """Merge all sidecars a data file inherits, the most specific one last."""
    metadata: dict[str, Any] = {}
    for candidate in inheritance_candidates(path, suffix, ".json"):
        sidecar = json_by_path.get(candidate)
        if sidecar:
            metadata.update(sidecar)
    return metadata


def _check_bold(
    header: Optional[NiftiHeader],
    file: FileRef,
    metadata: dict[str, Any],
    events: Sequence[str],
) -> list[Issue]:
    issues = []
    repetition_time = metadata.get("RepetitionTime")
    if repetition_time is None:
        issues.append(Issue(code=10, file=file))
    elif header is not None and header.dim[0] >= 4:
        issues.extend(_check_repetition_time(header, file, repetition_time))

    if "SliceTiming" not in metadata:
        issues.append(Issue(code=13, file=file))

    task = dict(parse_name(file.name).entities).get("task", "")
    if "rest" not in task:
        event_paths = set(events)
        candidates = inheritance_candidates(file.relative_path, "events", ".tsv")
        if not any(candidate in event_paths for candidate in candidates):
            issues.append(Issue(code=25, file=file, evidence=f"task-{task}"))
    return issues


def _check_repetition_time(header: NiftiHeader, file: FileRef, repetition_time: Any) -> list[Issue]:
    unit = header.xyzt_units[1]
    if unit not in TIME_UNIT_SECONDS:
        return [Issue(code=11, file=file, evidence=f"temporal unit: {unit or 'unknown'}")]
    try:
        expected = float(repetition_time)
    except (TypeError, ValueError):
        return []
    header_tr = header.pixdim[4] * TIME_UNIT_SECONDS[unit]
    if not math.isclose(header_tr, expected, abs_tol=REPETITION_TIME_TOLERANCE):
        return [
            Issue(
                code=12,
                file=file,
                evidence=f"header: {header_tr}s, JSON: {expected}s",
            )
        ]
    return []


def _check_gradients(
    header: Optional[NiftiHeader],
    file: FileRef,
    bfile_by_path: Mapping[str, str],
    existing: set[str],
) -> list[Issue]:
    issues = []
    for code, extension in ((32, ".bvec"), (33, ".bval")):
        candidates = inheritance_candidates(file.relative_path, "dwi", extension)
        present = [candidate for candidate in candidates if candidate in existing]
        if not present:
            issues.append(Issue(code=code, file=file))
            continue

        # Unreadable companions are reported on their own
        contents = bfile_by_path.get(present[-1])
        if header is None or contents is None:
            continue
        volumes = header.volume_count
        counts = [len(row) for row in parse_rows(contents)]
        if any(count != volumes for count in counts):
            issues.append(
                Issue(
                    code=29,
                    file=file,
                    evidence=f"{volumes} volumes in header, {present[-1]} has rows of "
                    f"{', '.join(str(count) for count in counts)} values",
                )
            )
    return issues
