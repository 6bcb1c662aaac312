"""Data models for bids-checker."""

from bids_checker.models.files import FileRef
from bids_checker.models.issue import Issue, IssueGroup, Severity
from bids_checker.models.result import ValidationResult
from bids_checker.models.summary import Summary

__all__ = [
    "FileRef",
    "Issue",
    "IssueGroup",
    "Severity",
    "Summary",
    "ValidationResult",
]
