"""Dataset summary accumulation and modality grouping."""

import threading
from collections.abc import Iterable

from bids_checker.models import FileRef, Summary
from bids_checker.paths import extract_label

# Ordered (tokens, replacement) rules; earlier rules take priority
MODALITY_GROUPS: list[tuple[tuple[str, ...], str]] = [
    (("magnitude1", "magnitude2", "phase1", "phase2"), "fieldmap"),
    (("magnitude1", "magnitude2", "phasediff"), "fieldmap"),
    (("magnitude", "fieldmap"), "fieldmap"),
    (("epi",), "fieldmap"),
]


def group_modalities(modalities: Iterable[str]) -> list[str]:
    """Collapse complete groups of modality tokens into their group label.

    Rules are applied in order to a working copy. When every token of a rule
    is present, the replacement is appended and one occurrence of each token
    is removed before the next rule is evaluated, so later rules only see
    tokens earlier rules left behind.

    Args:
        modalities: Modality tokens collected from image file names

    Returns:
        Grouped modalities, in first-seen order and without duplicates

    Example:
        >>> group_modalities(["T1w", "magnitude1", "magnitude2", "phasediff"])
        ['T1w', 'fieldmap']
    """
    working = list(modalities)
    for tokens, replacement in MODALITY_GROUPS:
        if all(token in working for token in tokens):
            working.append(replacement)
            for token in tokens:
                working.remove(token)
    return list(dict.fromkeys(working))


class SummaryBuilder:
    """Thread-safe accumulator of dataset statistics during phase 1."""

    def __init__(self, total_files: int = 0):
        self._lock = threading.Lock()
        self._subjects: list[str] = []
        self._sessions: list[str] = []
        self._tasks: list[str] = []
        self._modalities: list[str] = []
        self._size = 0
        self._total_files = total_files

    def add_file(self, file: FileRef) -> None:
        """Record a file's size and the subject/session labels in its path."""
        subject = extract_label(file.relative_path, "sub")
        session = extract_label(file.relative_path, "ses")
        with self._lock:
            self._size += file.size
            if subject and subject not in self._subjects:
                self._subjects.append(subject)
            if session and session not in self._sessions:
                self._sessions.append(session)

    def add_modality(self, modality: str) -> None:
        with self._lock:
            if modality not in self._modalities:
                self._modalities.append(modality)

    def add_task(self, task: str) -> None:
        with self._lock:
            if task not in self._tasks:
                self._tasks.append(task)

    def build(self) -> Summary:
        """Build the final summary, applying modality grouping."""
        with self._lock:
            raw_modalities = sorted(self._modalities)
            return Summary(
                subjects=sorted(self._subjects),
                sessions=sorted(self._sessions),
                tasks=sorted(self._tasks),
                modalities=group_modalities(raw_modalities),
                raw_modalities=raw_modalities,
                total_files=self._total_files,
                size=self._size,
            )
