"""Validation pipeline: run-scoped context, summary, aggregation and orchestration."""

from bids_checker.pipeline.aggregate import aggregate_issues, categorize_issues
from bids_checker.pipeline.context import ValidationContext
from bids_checker.pipeline.runner import NotBIDSDatasetError, ValidationPipeline, validate
from bids_checker.pipeline.summary import MODALITY_GROUPS, SummaryBuilder, group_modalities

__all__ = [
    "MODALITY_GROUPS",
    "NotBIDSDatasetError",
    "SummaryBuilder",
    "ValidationContext",
    "ValidationPipeline",
    "aggregate_issues",
    "categorize_issues",
    "group_modalities",
    "validate",
]
