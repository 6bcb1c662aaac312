"""Issue models produced by validation."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bids_checker.models.files import FileRef


class Severity(str, Enum):
    """Severity of an issue code."""

    ERROR = "error"
    WARNING = "warning"


class Issue(BaseModel):
    """A single occurrence of an issue code.

    Issues are immutable once created. Severity and the human-readable reason
    are not stored per occurrence; they are looked up by code in the catalog
    when issues are aggregated.

    Attributes:
        code: Numeric issue code (see bids_checker.issues.catalog)
        file: File the issue was found in, if any
        evidence: Text supporting the issue (offending row, value, file name)
        reason: Occurrence-specific explanation overriding the catalog text
    """

    model_config = ConfigDict(frozen=True)

    code: int
    file: Optional[FileRef] = None
    evidence: Optional[str] = None
    reason: Optional[str] = None

    @property
    def relative_path(self) -> str:
        """Relative path of the affected file ("" when not file-specific)."""
        return self.file.relative_path if self.file else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.relative_path or None,
            "evidence": self.evidence,
            "reason": self.reason,
        }


class IssueGroup(BaseModel):
    """All occurrences of one issue code, as reported to the user.

    Attributes:
        code: Numeric issue code
        key: Symbolic name of the code (e.g., "NOT_INCLUDED")
        severity: Severity from the catalog
        reason: Catalog explanation of the issue
        files: Occurrences, sorted by relative path
    """

    code: int
    key: str
    severity: Severity
    reason: str
    files: List[Issue] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "key": self.key,
            "severity": self.severity.value,
            "reason": self.reason,
            "files": [issue.to_dict() for issue in self.files],
        }
