"""Validation of diffusion gradient files (.bval and .bvec)."""

from bids_checker.models import FileRef, Issue


def parse_rows(contents: str) -> list[list[str]]:
    """Split b-file contents into rows of whitespace-separated values, skipping blank rows."""
    return [line.split() for line in contents.splitlines() if line.strip()]


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def validate_bval(file: FileRef, contents: str) -> list[Issue]:
    """A .bval file holds exactly one row of numeric b-values."""
    issues = []
    rows = parse_rows(contents)
    if len(rows) != 1:
        issues.append(Issue(code=30, file=file, evidence=f"found {len(rows)} rows"))
    bad_values = [value for row in rows for value in row if not _is_number(value)]
    if bad_values:
        issues.append(Issue(code=46, file=file, evidence=", ".join(bad_values[:5])))
    return issues


def validate_bvec(file: FileRef, contents: str) -> list[Issue]:
    """A .bvec file holds exactly three rows (x, y, z) of numeric gradient components."""
    issues = []
    rows = parse_rows(contents)
    if len(rows) != 3:
        issues.append(Issue(code=31, file=file, evidence=f"found {len(rows)} rows"))
    bad_values = [value for row in rows for value in row if not _is_number(value)]
    if bad_values:
        issues.append(Issue(code=47, file=file, evidence=", ".join(bad_values[:5])))
    return issues
