"""Content validators for individual files and cross-file checks.

Each validator takes file data and returns a list of issues. The pipeline
receives them bundled in a ContentValidators instance, so any of them can be
replaced (e.g., in tests) without touching the orchestration.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from bids_checker.validators.bvalues import validate_bval, validate_bvec
from bids_checker.validators.header_fields import validate_header_fields
from bids_checker.validators.nifti import validate_nifti
from bids_checker.validators.session import validate_sessions
from bids_checker.validators.sidecar import validate_json
from bids_checker.validators.tsv import validate_tsv


@dataclass(frozen=True)
class ContentValidators:
    """The set of validators used by one pipeline."""

    tsv: Callable[..., list] = validate_tsv
    json: Callable[..., tuple[list, Optional[dict[str, Any]]]] = validate_json
    nifti: Callable[..., list] = validate_nifti
    bval: Callable[..., list] = validate_bval
    bvec: Callable[..., list] = validate_bvec
    header_fields: Callable[..., list] = validate_header_fields
    sessions: Callable[..., list] = validate_sessions


__all__ = [
    "ContentValidators",
    "validate_bval",
    "validate_bvec",
    "validate_header_fields",
    "validate_json",
    "validate_nifti",
    "validate_sessions",
    "validate_tsv",
]
