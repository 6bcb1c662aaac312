"""Cross-subject file consistency."""

import re
from collections import defaultdict
from collections.abc import Sequence

from bids_checker.models import FileRef, Issue

_SUBJECT_DIR_RE = re.compile(r"^/(sub-[a-zA-Z0-9]+)/")
_PLACEHOLDER = "<sub>"


def validate_sessions(files: Sequence[FileRef]) -> list[Issue]:
    """Warn about files that some subjects have and others lack.

    Each subject's tree is reduced to a set of paths with the subject label
    replaced by a placeholder; every path in the union that a subject lacks is
    reported as a missing file of that subject.

    Args:
        files: All files of the dataset

    Returns:
        One INCONSISTENT_SUBJECTS warning per missing file
    """
    subject_files: dict[str, set[str]] = defaultdict(set)
    for file in files:
        match = _SUBJECT_DIR_RE.match(file.relative_path)
        if not match:
            continue
        subject = match.group(1)
        pattern = re.escape(subject) + r"(?=[/_.])"
        subject_files[subject].add(re.sub(pattern, _PLACEHOLDER, file.relative_path))

    if len(subject_files) < 2:
        return []

    all_files = set().union(*subject_files.values())
    issues = []
    for subject in sorted(subject_files):
        for missing in sorted(all_files - subject_files[subject]):
            expected = missing.replace(_PLACEHOLDER, subject)
            issues.append(
                Issue(
                    code=38,
                    file=FileRef.missing(expected),
                    evidence=f"Subject: {subject}; Missing file: {expected.rsplit('/', 1)[-1]}",
                )
            )
    return issues
