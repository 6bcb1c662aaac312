"""Cross-run comparison of NIfTI header fields."""

import re
from collections import Counter, defaultdict
from collections.abc import Sequence

from bids_checker.io import NiftiHeader
from bids_checker.models import FileRef, Issue

_VARIANT_ENTITIES_RE = re.compile(r"(sub|ses|run)-[a-zA-Z0-9]+_")


def _scan_type(file: FileRef) -> str:
    """Key shared by scans that should have identical acquisition parameters."""
    directory = file.relative_path.rsplit("/", 1)[0]
    datatype = directory.rsplit("/", 1)[-1]
    return datatype + "/" + _VARIANT_ENTITIES_RE.sub("", file.name)


def validate_header_fields(headers: Sequence[tuple[FileRef, NiftiHeader]]) -> list[Issue]:
    """Report scans whose dimensions or voxel sizes differ from their peers.

    Scans are grouped by datatype directory and file name with subject,
    session and run entities removed (e.g., all "anat/T1w.nii.gz"). Within a
    group, the most common value of each field is taken as the reference.

    Args:
        headers: (file, header) pairs of all successfully read NIfTI images

    Returns:
        One INCONSISTENT_PARAMETERS warning per deviating scan and field
    """
    groups: dict[str, list[tuple[FileRef, NiftiHeader]]] = defaultdict(list)
    for file, header in sorted(headers, key=lambda pair: pair[0].relative_path):
        if file.relative_path.startswith("/derivatives/"):
            continue
        groups[_scan_type(file)].append((file, header))

    issues = []
    for members in groups.values():
        if len(members) < 2:
            continue
        for field, extract in (
            ("dimensions", lambda h: tuple(h.dim[1:4])),
            ("resolution", lambda h: tuple(round(value, 3) for value in h.pixdim[1:4])),
        ):
            values = [(file, extract(header)) for file, header in members]
            counter = Counter(value for _, value in values)
            if len(counter) < 2:
                continue
            reference, count = counter.most_common(1)[0]
            for file, value in values:
                if value != reference:
                    issues.append(
                        Issue(
                            code=39,
                            file=file,
                            evidence=f"The most common set of {field} is: "
                            f"{', '.join(str(v) for v in reference)} (for {count} scans). "
                            f"This file has the {field}: {', '.join(str(v) for v in value)}.",
                        )
                    )
    return issues
