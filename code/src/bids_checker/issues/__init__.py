"""Issue code catalog."""

from bids_checker.issues.catalog import (
    FIELDMAP_RELATED_CODES,
    ISSUE_CATALOG,
    IssueSpec,
    get_issue_spec,
)

__all__ = ["FIELDMAP_RELATED_CODES", "ISSUE_CATALOG", "IssueSpec", "get_issue_spec"]
