"""Validation of tab-separated value files."""

import csv
import io

from bids_checker.models import FileRef, Issue

IMPROPER_NA_VALUES = {"NA", "na", "nan", "NaN"}


def validate_tsv(file: FileRef, contents: str, is_events: bool) -> list[Issue]:
    """Check the table structure of a TSV file.

    Args:
        file: The TSV file
        contents: File contents
        is_events: Whether the file is an events file (onset/duration columns)

    Returns:
        Issues found (codes 20-24)
    """
    issues: list[Issue] = []
    reader = csv.reader(io.StringIO(contents, newline=""), delimiter="\t", quoting=csv.QUOTE_NONE)
    rows = list(reader)
    while rows and not any(cell.strip() for cell in rows[-1]):
        rows.pop()
    if not rows:
        return issues

    headers = rows[0]

    for line_number, values in enumerate(rows[1:], start=2):
        row = "\t".join(values)
        if len(values) != len(headers):
            issues.append(Issue(code=22, file=file, evidence=f"row {line_number}: {row}"))
            continue
        if any(value == "" for value in values):
            issues.append(Issue(code=23, file=file, evidence=f"row {line_number}: {row}"))
        if any(value in IMPROPER_NA_VALUES for value in values):
            issues.append(Issue(code=24, file=file, evidence=f"row {line_number}: {row}"))

    if is_events:
        if not headers or headers[0] != "onset":
            issues.append(Issue(code=20, file=file, evidence="\t".join(headers)))
        if len(headers) < 2 or headers[1] != "duration":
            issues.append(Issue(code=21, file=file, evidence="\t".join(headers)))

    return issues
