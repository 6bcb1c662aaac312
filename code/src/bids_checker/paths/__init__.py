"""BIDS path grammar, entity parsing and the quick structural test."""

from bids_checker.paths.entities import (
    extract_label,
    inheritance_candidates,
    modality_of,
    parse_name,
)
from bids_checker.paths.grammar import (
    PathCategory,
    classify,
    is_bids,
    is_func_bold,
    matching_categories,
)
from bids_checker.paths.quick_test import could_be_bids

__all__ = [
    "PathCategory",
    "classify",
    "could_be_bids",
    "extract_label",
    "inheritance_candidates",
    "is_bids",
    "is_func_bold",
    "matching_categories",
    "modality_of",
    "parse_name",
]
