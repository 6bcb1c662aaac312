"""Run-scoped validation state."""

import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from bids_checker.io import NiftiHeader
from bids_checker.models import FileRef, Issue


@dataclass
class ValidationContext:
    """Mutable state of one validation run.

    Created fresh for every run and discarded once the result is built. During
    phase 1 workers write only the keys of the file they process; phase 2
    reads the mappings as complete snapshots.

    Attributes:
        issues: Issues found so far (append-only, order irrelevant)
        json_by_path: Parsed JSON sidecars (None when unparsable)
        bfile_by_path: Raw .bval/.bvec contents
        niftis: NIfTI images deferred to phase 2
        events: Relative paths of events files
        headers: (file, header) pairs of successfully read NIfTI images
    """

    issues: list[Issue] = field(default_factory=list)
    json_by_path: dict[str, Optional[dict[str, Any]]] = field(default_factory=dict)
    bfile_by_path: dict[str, str] = field(default_factory=dict)
    niftis: list[FileRef] = field(default_factory=list)
    events: list[str] = field(default_factory=list)
    headers: list[tuple[FileRef, NiftiHeader]] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add_issues(self, issues: list[Issue]) -> None:
        if not issues:
            return
        with self._lock:
            self.issues.extend(issues)

    def add_issue(self, issue: Issue) -> None:
        with self._lock:
            self.issues.append(issue)

    def store_json(self, path: str, data: Optional[dict[str, Any]]) -> None:
        with self._lock:
            self.json_by_path[path] = data

    def store_bfile(self, path: str, contents: str) -> None:
        with self._lock:
            self.bfile_by_path[path] = contents

    def defer_nifti(self, file: FileRef) -> None:
        with self._lock:
            self.niftis.append(file)

    def add_events(self, path: str) -> None:
        with self._lock:
            self.events.append(path)

    def add_header(self, file: FileRef, header: NiftiHeader) -> None:
        with self._lock:
            self.headers.append((file, header))
