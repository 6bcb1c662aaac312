"""Configuration models for bids-checker."""

from pydantic import BaseModel, Field


class ValidationOptions(BaseModel):
    """Options changing what a validation run reports.

    Attributes:
        ignore_warnings: Drop all warning-severity issues from the result
        ignore_nifti_headers: Skip decoding NIfTI headers; header-based checks
                              are not performed
    """

    ignore_warnings: bool = False
    ignore_nifti_headers: bool = False


class ValidatorConfig(BaseModel):
    """Root configuration model for bids-checker.

    Attributes:
        ignore_warnings: See ValidationOptions
        ignore_nifti_headers: See ValidationOptions
        max_workers: Maximum number of threads reading and validating files
    """

    ignore_warnings: bool = False
    ignore_nifti_headers: bool = False
    max_workers: int = Field(
        default=8,
        ge=1,
        description="Maximum number of parallel workers for file validation",
    )

    @property
    def options(self) -> ValidationOptions:
        return ValidationOptions(
            ignore_warnings=self.ignore_warnings,
            ignore_nifti_headers=self.ignore_nifti_headers,
        )
