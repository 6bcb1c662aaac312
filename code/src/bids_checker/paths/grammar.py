"""BIDS path grammar.

Classifies a dataset-relative path (POSIX, leading "/") into the BIDS
category it belongs to, or INVALID when no grammar accepts it.

Grammars for files inside subject directories capture the subject label from
the directory, the optional session directory and the optional session token
of the file name separately. The session of the directory and the session of
the file name must agree (both absent, or both present with the same label);
this is checked on the captured groups after the pattern matched, see
``_session_consistent``.
"""

import re
from enum import Enum
from typing import Callable, Optional

LABEL = r"[a-zA-Z0-9]+"
INDEX = r"[0-9]+"

ANAT_SUFFIXES = [
    "T1w",
    "T2w",
    "T1map",
    "T2map",
    "FLAIR",
    "PD",
    "PDT2",
    "inplaneT1",
    "inplaneT2",
    "angio",
    "defacemask",
    "SWImagandphase",
]
DWI_SUFFIXES = ["dwi", "sbref"]
FIELDMAP_SUFFIXES = ["phasediff", "phase1", "phase2", "magnitude1", "magnitude2", "fieldmap", "epi"]

FIXED_TOP_LEVEL_NAMES = frozenset(
    {
        "/README",
        "/CHANGES",
        "/dataset_description.json",
        "/participants.tsv",
        "/phasediff.json",
        "/phase1.json",
        "/phase2.json",
        "/fieldmap.json",
    }
)


class PathCategory(str, Enum):
    """Category of a dataset path."""

    TOP_LEVEL = "top_level"
    CODE_OR_DERIVATIVES = "code_or_derivatives"
    SESSION_LEVEL = "session_level"
    SUBJECT_LEVEL = "subject_level"
    ANAT = "anat"
    DWI = "dwi"
    FUNC = "func"
    BEHAVIORAL = "behavioral"
    CONTINUOUS = "continuous"
    FIELDMAP = "fieldmap"
    VERSION_CONTROL = "version_control"
    INVALID = "invalid"


def _alternatives(options: list[str]) -> str:
    return "(?:" + "|".join(re.escape(option) for option in options) + ")"


def _subject_tree(datatype: Optional[str], stem: str) -> re.Pattern:
    """Compile a grammar for a file below a subject (and session) directory.

    Args:
        datatype: Data directory regex (e.g., "anat", "(?:func|beh)"), or None
                  for files directly in the subject/session directory
        stem: Regex for the remainder of the file name after the subject and
              optional session tokens

    Returns:
        Compiled pattern exposing the groups "session" (directory) and
        "file_session" (file name)
    """
    directory = rf"/(?P<subject>sub-{LABEL})(?:/(?P<session>ses-{LABEL}))?"
    if datatype:
        directory += "/" + datatype
    name = rf"(?P=subject)(?:_(?P<file_session>ses-{LABEL}))?" + stem
    return re.compile("^" + directory + "/" + name + "$")


def _session_consistent(match: Optional[re.Match]) -> bool:
    """Check the session directory and session file token of a match agree."""
    if match is None:
        return False
    return match.group("session") == match.group("file_session")


def _conditional_match(pattern: re.Pattern, path: str) -> bool:
    return _session_consistent(pattern.match(path))


# Optional entity tokens shared by the grammars, each preceded by "_"
_ACQ = rf"(?:_acq-{LABEL})?"
_REC = rf"(?:_rec-{LABEL})?"
_RUN = rf"(?:_run-{INDEX})?"
_TASK = rf"_task-{LABEL}"

# Same tokens for root-level names, each followed by "_"
_TOP_SES = rf"(?:ses-{LABEL}_)?"
_TOP_ACQ = rf"(?:acq-{LABEL}_)?"
_TOP_REC = rf"(?:rec-{LABEL}_)?"
_TOP_RUN = rf"(?:run-{INDEX}_)?"

_FUNC_SIDECARS = _alternatives(["_bold.json", "_events.tsv", "_physio.json", "_stim.json"])
_DWI_SIDECAR_EXT = r"\.(?:json|bval|bvec)"

FUNC_TOP_RE = re.compile(
    rf"^/{_TOP_SES}task-{LABEL}{_ACQ}{_REC}{_RUN}{_FUNC_SIDECARS}$"
)
ANAT_TOP_RE = re.compile(
    rf"^/{_TOP_SES}{_TOP_ACQ}{_TOP_REC}{_TOP_RUN}{_alternatives(ANAT_SUFFIXES)}\.json$"
)
DWI_TOP_RE = re.compile(rf"^/{_TOP_SES}{_TOP_ACQ}{_TOP_REC}{_TOP_RUN}dwi{_DWI_SIDECAR_EXT}$")
MULTI_DIR_FIELDMAP_RE = re.compile(rf"^/dir-{INDEX}_epi\.json$")

CODE_OR_DERIVATIVES_RE = re.compile(r"^/(?:code|derivatives)/.*$")
VERSION_CONTROL_RE = re.compile(r"^/\.git/.*$")

SCANS_RE = _subject_tree(None, r"_scans\.tsv")
FUNC_SESSION_RE = _subject_tree(None, _TASK + _ACQ + _REC + _RUN + _FUNC_SIDECARS)
ANAT_SESSION_RE = _subject_tree(
    None, _ACQ + _REC + _RUN + "_" + _alternatives(ANAT_SUFFIXES) + r"\.json"
)
DWI_SESSION_RE = _subject_tree(None, _ACQ + _REC + _RUN + "_dwi" + _DWI_SIDECAR_EXT)

SESSIONS_RE = re.compile(rf"^/(?P<subject>sub-{LABEL})/(?P=subject)_sessions\.tsv$")

ANAT_RE = _subject_tree(
    "anat",
    _ACQ + _REC + _RUN + "_" + _alternatives(ANAT_SUFFIXES) + r"\.(?:nii\.gz|nii|json)",
)
DWI_RE = _subject_tree(
    "dwi",
    _ACQ + _REC + _RUN + "_" + _alternatives(DWI_SUFFIXES) + r"\.(?:nii\.gz|nii|json|bvec|bval)",
)
FIELDMAP_RE = _subject_tree(
    "fmap",
    _ACQ
    + _REC
    + rf"(?:_dir-{INDEX})?"
    + _RUN
    + "_"
    + _alternatives(FIELDMAP_SUFFIXES)
    + r"\.(?:nii\.gz|nii|json)",
)
FUNC_RE = _subject_tree(
    "func",
    _TASK
    + _ACQ
    + _REC
    + _RUN
    + _alternatives(
        [
            "_bold.nii.gz",
            "_bold.nii",
            "_bold.json",
            "_sbref.nii.gz",
            "_sbref.json",
            "_events.tsv",
            "_physio.tsv.gz",
            "_stim.tsv.gz",
            "_physio.json",
            "_stim.json",
        ]
    ),
)
FUNC_BOLD_RE = _subject_tree(
    "func",
    _TASK
    + _ACQ
    + _REC
    + _RUN
    + _alternatives(["_bold.nii.gz", "_bold.nii", "_sbref.nii.gz", "_sbref.nii"]),
)
BEHAVIORAL_RE = _subject_tree(
    "beh",
    _TASK
    + _ACQ
    + _REC
    + _RUN
    + _alternatives(
        [
            "_beh.json",
            "_events.tsv",
            "_physio.tsv.gz",
            "_stim.tsv.gz",
            "_physio.json",
            "_stim.json",
        ]
    ),
)
CONTINUOUS_RE = _subject_tree(
    "(?:func|beh)",
    _TASK
    + _ACQ
    + _REC
    + _RUN
    + rf"(?:_recording-{LABEL})?"
    + _alternatives(["_physio.tsv.gz", "_stim.tsv.gz", "_physio.json", "_stim.json"]),
)


def is_top_level(path: str) -> bool:
    """Check if the path is an allowed file at the dataset root."""
    return (
        path in FIXED_TOP_LEVEL_NAMES
        or bool(FUNC_TOP_RE.match(path))
        or bool(DWI_TOP_RE.match(path))
        or bool(ANAT_TOP_RE.match(path))
        or bool(MULTI_DIR_FIELDMAP_RE.match(path))
    )


def is_code_or_derivatives(path: str) -> bool:
    return bool(CODE_OR_DERIVATIVES_RE.match(path))


def is_version_control(path: str) -> bool:
    return bool(VERSION_CONTROL_RE.match(path))


def is_session_level(path: str) -> bool:
    """Check if the path is a scans file or an inherited sidecar in a subject/session folder."""
    return (
        _conditional_match(SCANS_RE, path)
        or _conditional_match(FUNC_SESSION_RE, path)
        or _conditional_match(ANAT_SESSION_RE, path)
        or _conditional_match(DWI_SESSION_RE, path)
    )


def is_subject_level(path: str) -> bool:
    """Check if the path is a subject's sessions file."""
    return bool(SESSIONS_RE.match(path))


def is_anat(path: str) -> bool:
    return _conditional_match(ANAT_RE, path)


def is_dwi(path: str) -> bool:
    return _conditional_match(DWI_RE, path)


def is_fieldmap(path: str) -> bool:
    return _conditional_match(FIELDMAP_RE, path)


def is_func(path: str) -> bool:
    return _conditional_match(FUNC_RE, path)


def is_func_bold(path: str) -> bool:
    """Check if the path is a functional BOLD (or single-band reference) image."""
    return _conditional_match(FUNC_BOLD_RE, path)


def is_behavioral(path: str) -> bool:
    return _conditional_match(BEHAVIORAL_RE, path)


def is_continuous(path: str) -> bool:
    """Check if the path is a physiological or stimulus recording."""
    return _conditional_match(CONTINUOUS_RE, path)


# Evaluation order; the first matching predicate decides the category
PREDICATES: list[tuple[PathCategory, Callable[[str], bool]]] = [
    (PathCategory.TOP_LEVEL, is_top_level),
    (PathCategory.CODE_OR_DERIVATIVES, is_code_or_derivatives),
    (PathCategory.SESSION_LEVEL, is_session_level),
    (PathCategory.SUBJECT_LEVEL, is_subject_level),
    (PathCategory.ANAT, is_anat),
    (PathCategory.DWI, is_dwi),
    (PathCategory.FUNC, is_func),
    (PathCategory.BEHAVIORAL, is_behavioral),
    (PathCategory.CONTINUOUS, is_continuous),
    (PathCategory.FIELDMAP, is_fieldmap),
    (PathCategory.VERSION_CONTROL, is_version_control),
]


def matching_categories(path: str) -> list[PathCategory]:
    """Return every category whose grammar accepts the path.

    Args:
        path: Dataset-relative POSIX path with a leading "/"

    Returns:
        Matching categories in evaluation order (empty if none)
    """
    return [category for category, predicate in PREDICATES if predicate(path)]


def classify(path: str) -> PathCategory:
    """Classify a dataset-relative path.

    Args:
        path: Dataset-relative POSIX path with a leading "/"

    Returns:
        The first matching category, or PathCategory.INVALID
    """
    for category, predicate in PREDICATES:
        if predicate(path):
            return category
    return PathCategory.INVALID


def is_bids(path: str) -> bool:
    """Check if a path is valid anywhere in the BIDS layout."""
    return classify(path) is not PathCategory.INVALID
