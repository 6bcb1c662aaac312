"""Static table of issue codes.

Each code maps to a symbolic key, a severity and the explanation shown to
users. Validators only emit codes; severity is never decided at the point
where an issue is found.
"""

from dataclasses import dataclass

from bids_checker.models.issue import Severity


@dataclass(frozen=True)
class IssueSpec:
    """Catalog entry for one issue code."""

    key: str
    severity: Severity
    reason: str


ERROR = Severity.ERROR
WARNING = Severity.WARNING

ISSUE_CATALOG: dict[int, IssueSpec] = {
    1: IssueSpec(
        "NOT_INCLUDED",
        ERROR,
        "Files with such naming scheme are not part of BIDS specification. This error is "
        "most commonly caused by typos in file names that make them not BIDS compatible.",
    ),
    2: IssueSpec(
        "REPETITION_TIME_GREATER_THAN",
        WARNING,
        "'RepetitionTime' is greater than 100 are you sure it's expressed in seconds?",
    ),
    3: IssueSpec(
        "ECHO_TIME_GREATER_THAN",
        WARNING,
        "'EchoTime' is greater than 1 are you sure it's expressed in seconds?",
    ),
    4: IssueSpec(
        "ECHO_TIME_DIFFERENCE_GREATER_THAN",
        WARNING,
        "'EchoTime1' and 'EchoTime2' differ by more than 1 are you sure they are "
        "expressed in seconds?",
    ),
    5: IssueSpec(
        "TOTAL_READOUT_TIME_GREATER_THAN",
        WARNING,
        "'TotalReadoutTime' is greater than 10 are you sure it's expressed in seconds?",
    ),
    6: IssueSpec(
        "ECHO_TIME_NOT_DEFINED",
        WARNING,
        "You should define 'EchoTime' for this file. If you don't provide this information "
        "field map correction will not be possible.",
    ),
    7: IssueSpec(
        "PHASE_ENCODING_DIRECTION_NOT_DEFINED",
        WARNING,
        "You should define 'PhaseEncodingDirection' for this file. If you don't provide this "
        "information field map correction will not be possible.",
    ),
    8: IssueSpec(
        "EFFECTIVE_ECHO_SPACING_NOT_DEFINED",
        WARNING,
        "You should define 'EffectiveEchoSpacing' for this file. If you don't provide this "
        "information field map correction will not be possible.",
    ),
    9: IssueSpec(
        "TOTAL_READOUT_TIME_NOT_DEFINED",
        WARNING,
        "You should define 'TotalReadoutTime' for this file. If you don't provide this "
        "information field map correction using multiple Phase Encoding Directions will "
        "not be possible.",
    ),
    10: IssueSpec(
        "REPETITION_TIME_MUST_DEFINE",
        ERROR,
        "You have to define 'RepetitionTime' for this file.",
    ),
    11: IssueSpec(
        "REPETITION_TIME_UNITS",
        WARNING,
        "Repetition time was not defined in seconds, milliseconds or microseconds in the "
        "scan's header.",
    ),
    12: IssueSpec(
        "REPETITION_TIME_MISMATCH",
        ERROR,
        "Repetition time did not match between the scan's header and the associated JSON "
        "metadata file.",
    ),
    13: IssueSpec(
        "SLICE_TIMING_NOT_DEFINED",
        WARNING,
        "You should define 'SliceTiming' for this file. If you don't provide this "
        "information slice time correction will not be possible.",
    ),
    20: IssueSpec(
        "EVENTS_COLUMN_ONSET",
        ERROR,
        "First column of the events file must be named 'onset'.",
    ),
    21: IssueSpec(
        "EVENTS_COLUMN_DURATION",
        ERROR,
        "Second column of the events file must be named 'duration'.",
    ),
    22: IssueSpec(
        "TSV_EQUAL_ROWS",
        ERROR,
        "All rows must have the same number of columns as there are headers.",
    ),
    23: IssueSpec(
        "TSV_EMPTY_CELL",
        ERROR,
        "Empty cell in TSV file detected: The proper way of labeling missing values is 'n/a'.",
    ),
    24: IssueSpec(
        "TSV_IMPROPER_NA",
        WARNING,
        "A proper way of labeling missing values is 'n/a'.",
    ),
    25: IssueSpec(
        "EVENTS_TSV_MISSING",
        WARNING,
        "Task scans should have a corresponding events.tsv file. If this is a resting state "
        "scan you can ignore this warning or rename the task to include the word 'rest'.",
    ),
    26: IssueSpec(
        "NIFTI_HEADER_UNREADABLE",
        ERROR,
        "We were unable to parse header data from this NIfTI file. Please ensure it is not "
        "corrupted or mislabeled.",
    ),
    27: IssueSpec(
        "JSON_INVALID",
        ERROR,
        "Not a valid JSON file.",
    ),
    28: IssueSpec(
        "GZ_NOT_GZIPPED",
        ERROR,
        "This file ends in the .gz extension but is not actually gzipped.",
    ),
    29: IssueSpec(
        "VOLUME_COUNT_MISMATCH",
        ERROR,
        "The number of volumes in this scan does not match the number of volumes in the "
        "corresponding .bvec and .bval files.",
    ),
    30: IssueSpec(
        "BVAL_MULTIPLE_ROWS",
        ERROR,
        ".bval files should contain exactly one row of volumes.",
    ),
    31: IssueSpec(
        "BVEC_NUMBER_ROWS",
        ERROR,
        ".bvec files should contain exactly three rows of volumes.",
    ),
    32: IssueSpec(
        "DWI_MISSING_BVEC",
        ERROR,
        "All dwi scans must have a corresponding .bvec file.",
    ),
    33: IssueSpec(
        "DWI_MISSING_BVAL",
        ERROR,
        "All dwi scans must have a corresponding .bval file.",
    ),
    36: IssueSpec(
        "NIFTI_TOO_SMALL",
        ERROR,
        "This file is too small to contain the minimal NIfTI header.",
    ),
    38: IssueSpec(
        "INCONSISTENT_SUBJECTS",
        WARNING,
        "Not all subjects contain the same files. Each subject should contain the same "
        "number of files with the same naming unless some files are known to be missing.",
    ),
    39: IssueSpec(
        "INCONSISTENT_PARAMETERS",
        WARNING,
        "Not all subjects/sessions/runs have the same scanning parameters.",
    ),
    44: IssueSpec(
        "FILE_READ",
        ERROR,
        "We were unable to read this file. Make sure it contains data (file size > 0 kB) "
        "and is not corrupted, incorrectly named, or incorrectly symlinked.",
    ),
    46: IssueSpec(
        "BVAL_NON_NUMERIC",
        ERROR,
        ".bval files should contain only numeric values.",
    ),
    47: IssueSpec(
        "BVEC_NON_NUMERIC",
        ERROR,
        ".bvec files should contain only numeric values.",
    ),
}

# Warnings only relevant when the dataset contains field maps
FIELDMAP_RELATED_CODES = frozenset({6, 7, 8, 9})


def get_issue_spec(code: int) -> IssueSpec:
    """Look up the catalog entry for an issue code.

    Args:
        code: Numeric issue code

    Returns:
        Catalog entry

    Raises:
        KeyError: If the code is not in the catalog
    """
    try:
        return ISSUE_CATALOG[code]
    except KeyError:
        raise KeyError(f"Unknown issue code: {code}") from None
