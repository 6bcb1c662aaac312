"""Issue aggregation into the reported error and warning groups."""

import logging
from collections import defaultdict
from collections.abc import Collection, Iterable

from bids_checker.config import ValidationOptions
from bids_checker.issues import FIELDMAP_RELATED_CODES, get_issue_spec
from bids_checker.models import Issue, IssueGroup, Severity

logger = logging.getLogger(__name__)


def categorize_issues(issues: Iterable[Issue]) -> list[IssueGroup]:
    """Group issues by code, ordered by code, with files sorted by path.

    Args:
        issues: Issues in any order

    Returns:
        One IssueGroup per code carrying the catalog severity and reason
    """
    by_code: dict[int, list[Issue]] = defaultdict(list)
    for issue in issues:
        by_code[issue.code].append(issue)

    groups = []
    for code in sorted(by_code):
        spec = get_issue_spec(code)
        groups.append(
            IssueGroup(
                code=code,
                key=spec.key,
                severity=spec.severity,
                reason=spec.reason,
                files=sorted(by_code[code], key=lambda issue: issue.relative_path),
            )
        )
    return groups


def aggregate_issues(
    issues: Iterable[Issue],
    options: ValidationOptions,
    modalities: Collection[str],
) -> tuple[list[IssueGroup], list[IssueGroup]]:
    """Split issues into error and warning groups.

    Warnings are dropped entirely with ignore_warnings. Field map related
    warnings are dropped when the grouped modalities contain no "fieldmap".

    Args:
        issues: All issues of the run
        options: Validation options
        modalities: Modalities after grouping

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[IssueGroup] = []
    warnings: list[IssueGroup] = []
    for group in categorize_issues(issues):
        if group.severity is Severity.ERROR:
            errors.append(group)
        elif group.severity is Severity.WARNING and not options.ignore_warnings:
            warnings.append(group)

    if "fieldmap" not in modalities:
        dropped = [group.code for group in warnings if group.code in FIELDMAP_RELATED_CODES]
        if dropped:
            logger.debug(f"No field maps in dataset, dropping warnings {dropped}")
        warnings = [group for group in warnings if group.code not in FIELDMAP_RELATED_CODES]

    return errors, warnings
