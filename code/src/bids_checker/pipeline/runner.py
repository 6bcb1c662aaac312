"""Two-phase validation pipeline.

Phase 1 classifies every file and runs the per-file content validators in a
thread pool. NIfTI images are only collected, because their validation needs
the sidecars, gradient files and events files gathered by all of phase 1.
Phase 2 starts after phase 1 has fully drained: it reads NIfTI headers and
validates the images, then runs the cross-file checks once.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Optional, Union

from bids_checker.config import ValidationOptions
from bids_checker.io import FileReadError, NiftiHeaderError, read_dir, read_file, read_nifti_header
from bids_checker.models import FileRef, Issue, ValidationResult
from bids_checker.paths import PathCategory, classify, could_be_bids, modality_of
from bids_checker.pipeline.aggregate import aggregate_issues
from bids_checker.pipeline.context import ValidationContext
from bids_checker.pipeline.summary import SummaryBuilder
from bids_checker.validators import ContentValidators

logger = logging.getLogger(__name__)

NIFTI_EXTENSIONS = (".nii", ".nii.gz")

# Called with (phase, completed, total) after each processed item
ProgressCallback = Callable[[str, int, int], None]


class NotBIDSDatasetError(Exception):
    """Raised when a file tree does not look like a BIDS dataset at all."""

    pass


class ValidationPipeline:
    """Validates a list of dataset files.

    Attributes:
        options: Validation options
        validators: Content validators used for each file kind
        max_workers: Maximum number of threads per phase
        progress_callback: Optional callback reporting per-phase progress
    """

    def __init__(
        self,
        options: Optional[ValidationOptions] = None,
        validators: Optional[ContentValidators] = None,
        max_workers: int = 8,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.options = options or ValidationOptions()
        self.validators = validators or ContentValidators()
        self.max_workers = max_workers
        self.progress_callback = progress_callback

        # Content handlers by extension; NIfTI images are handled separately
        self._handlers: dict[
            str, Callable[[ValidationContext, SummaryBuilder, FileRef, str], None]
        ] = {
            ".tsv": self._check_tsv,
            ".bvec": self._check_bvec,
            ".bval": self._check_bval,
            ".json": self._check_json,
        }

    def run(self, files: Iterable[FileRef]) -> ValidationResult:
        """Run the quick test, then the full validation.

        Args:
            files: Files of the dataset

        Returns:
            ValidationResult with errors, warnings and summary

        Raises:
            NotBIDSDatasetError: If the quick test rejects the file list
        """
        files = list(files)
        if not could_be_bids(files):
            raise NotBIDSDatasetError(
                "This does not appear to be a BIDS dataset: no NIfTI images found in "
                "sub-*/[ses-*/]{anat,func,dwi} directories"
            )
        return self.run_full(files)

    def run_full(self, files: list[FileRef]) -> ValidationResult:
        """Validate all files without the quick test.

        Args:
            files: Files of the dataset

        Returns:
            ValidationResult with errors, warnings and summary
        """
        context = ValidationContext()
        summary = SummaryBuilder(total_files=len(files))

        logger.info(f"Validating {len(files)} files")
        self._run_phase(
            "files", files, lambda file: self._validate_file(context, summary, file), context
        )

        # Phase 1 has drained: mappings and the NIfTI list are complete from here on
        niftis = sorted(context.niftis, key=lambda f: f.relative_path)
        logger.info(f"Validating {len(niftis)} NIfTI images")
        self._run_phase(
            "niftis", niftis, lambda file: self._validate_nifti(context, files, file), context
        )

        logger.info("Running cross-file checks")
        headers = sorted(context.headers, key=lambda pair: pair[0].relative_path)
        context.add_issues(self.validators.header_fields(headers))
        context.add_issues(self.validators.sessions(files))

        result_summary = summary.build()
        errors, warnings = aggregate_issues(context.issues, self.options, result_summary.modalities)
        logger.info(
            f"Validation finished: {sum(len(g.files) for g in errors)} errors, "
            f"{sum(len(g.files) for g in warnings)} warnings"
        )
        return ValidationResult(errors=errors, warnings=warnings, summary=result_summary)

    def _run_phase(
        self,
        phase: str,
        items: list[FileRef],
        worker: Callable[[FileRef], None],
        context: ValidationContext,
    ) -> None:
        """Run a worker over all items in a thread pool and wait for all of them.

        A worker failing on one file is recorded as a FILE_READ issue for that
        file; the remaining files are still validated.
        """
        total = len(items)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {executor.submit(worker, item): item for item in items}
            for completed, future in enumerate(as_completed(futures), start=1):
                file = futures[future]
                try:
                    future.result()
                except Exception as e:
                    logger.error(f"Failed to validate {file.relative_path}: {e}")
                    context.add_issue(Issue(code=44, file=file, evidence=str(e)))
                if self.progress_callback:
                    self.progress_callback(phase, completed, total)

    def _validate_file(
        self, context: ValidationContext, summary: SummaryBuilder, file: FileRef
    ) -> None:
        summary.add_file(file)

        if classify(file.relative_path) is PathCategory.INVALID:
            logger.debug(f"Not a BIDS path: {file.relative_path}")
            context.add_issue(Issue(code=1, file=file, evidence=file.name))
            return

        if file.name.endswith(NIFTI_EXTENSIONS):
            context.defer_nifti(file)
            summary.add_modality(modality_of(file.name))
            return

        handler = self._handlers.get(_extension(file.name))
        if handler is None:
            return

        try:
            contents = read_file(file)
        except FileReadError as e:
            context.add_issue(e.issue)
            return
        handler(context, summary, file, contents)

    def _check_tsv(
        self, context: ValidationContext, summary: SummaryBuilder, file: FileRef, contents: str
    ) -> None:
        is_events = file.name.endswith("_events.tsv")
        if is_events:
            context.add_events(file.relative_path)
        context.add_issues(self.validators.tsv(file, contents, is_events))

    def _check_bvec(
        self, context: ValidationContext, summary: SummaryBuilder, file: FileRef, contents: str
    ) -> None:
        context.store_bfile(file.relative_path, contents)
        context.add_issues(self.validators.bvec(file, contents))

    def _check_bval(
        self, context: ValidationContext, summary: SummaryBuilder, file: FileRef, contents: str
    ) -> None:
        context.store_bfile(file.relative_path, contents)
        context.add_issues(self.validators.bval(file, contents))

    def _check_json(
        self, context: ValidationContext, summary: SummaryBuilder, file: FileRef, contents: str
    ) -> None:
        issues, data = self.validators.json(file, contents)
        context.add_issues(issues)
        context.store_json(file.relative_path, data)

        if "task" in file.name and data:
            task = data.get("TaskName")
            if task:
                summary.add_task(str(task))

    def _validate_nifti(
        self, context: ValidationContext, files: list[FileRef], file: FileRef
    ) -> None:
        if self.options.ignore_nifti_headers:
            header = None
        else:
            try:
                header = read_nifti_header(file)
            except NiftiHeaderError as e:
                context.add_issue(e.issue)
                return
            context.add_header(file, header)

        context.add_issues(
            self.validators.nifti(
                header,
                file,
                context.json_by_path,
                context.bfile_by_path,
                files,
                context.events,
            )
        )


def _extension(name: str) -> str:
    """Return the last extension of a file name (".gz" for "x.tsv.gz")."""
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[-1]


def validate(
    root_or_files: Union[str, Path, Iterable[FileRef]],
    options: Optional[ValidationOptions] = None,
    max_workers: int = 8,
    progress_callback: Optional[ProgressCallback] = None,
) -> ValidationResult:
    """Validate a BIDS dataset.

    Args:
        root_or_files: Dataset root directory, or an already enumerated file list
        options: Validation options
        max_workers: Maximum number of threads per phase
        progress_callback: Optional callback(phase, completed, total)

    Returns:
        ValidationResult with errors, warnings and summary

    Raises:
        NotBIDSDatasetError: If the dataset does not look like BIDS at all
        DatasetNotFoundError: If a root directory was given and does not exist
    """
    if isinstance(root_or_files, (str, Path)):
        files = read_dir(root_or_files)
    else:
        files = list(root_or_files)

    pipeline = ValidationPipeline(
        options=options,
        max_workers=max_workers,
        progress_callback=progress_callback,
    )
    return pipeline.run(files)
