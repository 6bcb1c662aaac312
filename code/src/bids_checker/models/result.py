"""Validation result model."""

from dataclasses import dataclass, field
from typing import Any

from bids_checker.models.issue import IssueGroup
from bids_checker.models.summary import Summary


@dataclass
class ValidationResult:
    """Result of validating one dataset."""

    errors: list[IssueGroup] = field(default_factory=list)
    warnings: list[IssueGroup] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return sum(len(group.files) for group in self.errors)

    @property
    def warning_count(self) -> int:
        return sum(len(group.files) for group in self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [group.to_dict() for group in self.errors],
            "warnings": [group.to_dict() for group in self.warnings],
            "summary": self.summary.to_dict(),
        }
