"""bids-checker: Structural validation of BIDS neuroimaging datasets.

This package provides tools for:
- Classifying dataset paths against the BIDS naming grammar
- Validating file contents (TSV, JSON sidecars, NIfTI headers, b-values/b-vectors)
- Cross-file consistency checks and dataset summaries

Example usage:

    from bids_checker import validate
    from bids_checker.config import ValidationOptions

    result = validate("/path/to/dataset", ValidationOptions(ignore_warnings=True))
    for group in result.errors:
        print(group.code, group.key, len(group.files))
"""

__version__ = "0.1.0"

from bids_checker.pipeline import NotBIDSDatasetError, ValidationPipeline, validate  # noqa: E402

__all__ = ["__version__", "validate", "ValidationPipeline", "NotBIDSDatasetError"]
