"""Unit tests for entity parsing and sidecar inheritance."""

import pytest

from bids_checker.paths import extract_label, inheritance_candidates, modality_of, parse_name
from bids_checker.paths.entities import ParsedName, split_extension


@pytest.mark.unit
class TestExtractLabel:
    """Tests for extract_label."""

    def test_label_from_directory(self) -> None:
        """Test extracting a label terminated by a slash."""
        assert extract_label("/sub-01/anat/sub-01_T1w.nii.gz", "sub") == "01"

    def test_label_from_file_name(self) -> None:
        """Test extracting a label terminated by an underscore."""
        assert extract_label("/task-rest_bold.json", "task") == "rest"
        assert extract_label("/sub-01/ses-pre/anat/sub-01_ses-pre_T1w.nii.gz", "ses") == "pre"

    def test_absent_entity(self) -> None:
        """Test that a missing entity yields None."""
        assert extract_label("/README", "sub") is None

    def test_empty_label(self) -> None:
        """Test that an empty label yields None."""
        assert extract_label("/sub-/anat/x.nii", "sub") is None


@pytest.mark.unit
class TestParseName:
    """Tests for parse_name and related helpers."""

    def test_entities_suffix_extension(self) -> None:
        """Test splitting a full BIDS file name."""
        assert parse_name("sub-01_task-rest_run-1_bold.nii.gz") == ParsedName(
            [("sub", "01"), ("task", "rest"), ("run", "1")], "bold", ".nii.gz"
        )

    def test_name_without_entities(self) -> None:
        """Test a root-level name consisting only of a suffix."""
        assert parse_name("dwi.bval") == ParsedName([], "dwi", ".bval")

    def test_split_extension(self) -> None:
        """Test that the extension starts at the first dot."""
        assert split_extension("sub-01_bold.nii.gz") == ("sub-01_bold", ".nii.gz")
        assert split_extension("README") == ("README", "")

    def test_modality_of(self) -> None:
        """Test extracting the modality token."""
        assert modality_of("sub-01_T1w.nii.gz") == "T1w"
        assert modality_of("sub-01_task-rest_run-1_bold.nii") == "bold"
        assert modality_of("sub-01_magnitude1.nii.gz") == "magnitude1"


@pytest.mark.unit
class TestInheritanceCandidates:
    """Tests for inheritance_candidates."""

    def test_session_run_file(self) -> None:
        """Test candidate order from dataset root down to the data directory."""
        candidates = inheritance_candidates(
            "/sub-01/ses-1/func/sub-01_ses-1_task-rest_run-1_bold.nii.gz", "bold", ".json"
        )
        assert candidates == [
            "/task-rest_bold.json",
            "/task-rest_run-1_bold.json",
            "/sub-01/sub-01_task-rest_bold.json",
            "/sub-01/sub-01_task-rest_run-1_bold.json",
            "/sub-01/ses-1/sub-01_ses-1_task-rest_bold.json",
            "/sub-01/ses-1/sub-01_ses-1_task-rest_run-1_bold.json",
            "/sub-01/ses-1/func/sub-01_ses-1_task-rest_bold.json",
            "/sub-01/ses-1/func/sub-01_ses-1_task-rest_run-1_bold.json",
        ]

    def test_no_duplicates_without_run(self) -> None:
        """Test that run-less and full names collapse when there is no run."""
        candidates = inheritance_candidates("/sub-01/anat/sub-01_T1w.nii.gz", "T1w", ".json")
        assert candidates == ["/T1w.json", "/sub-01/sub-01_T1w.json", "/sub-01/anat/sub-01_T1w.json"]

    def test_companion_suffix(self) -> None:
        """Test that the companion suffix and extension replace the image's."""
        candidates = inheritance_candidates("/sub-01/dwi/sub-01_dwi.nii.gz", "dwi", ".bval")
        assert candidates[0] == "/dwi.bval"
        assert candidates[-1] == "/sub-01/dwi/sub-01_dwi.bval"
