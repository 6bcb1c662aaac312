"""Unit tests for file enumeration and reading."""

import gzip
from pathlib import Path

import pytest

from bids_checker.io import (
    DatasetNotFoundError,
    FileReadError,
    NiftiHeaderError,
    read_dir,
    read_file,
    read_nifti_header,
)
from bids_checker.models import FileRef
from conftest import file_ref, write_nifti, write_text


@pytest.mark.unit
class TestReadDir:
    """Tests for read_dir."""

    def test_lists_files_sorted(self, tmp_path: Path) -> None:
        """Test that all files are listed with relative paths and sizes."""
        write_text(tmp_path / "sub-01" / "anat" / "sub-01_T1w.json", "{}")
        write_text(tmp_path / "README", "hello")

        files = read_dir(tmp_path)
        assert [f.relative_path for f in files] == ["/README", "/sub-01/anat/sub-01_T1w.json"]
        assert files[0].name == "README"
        assert files[0].size == 5
        assert files[0].path == (tmp_path / "README").resolve()

    def test_missing_root(self, tmp_path: Path) -> None:
        """Test that a missing root directory raises."""
        with pytest.raises(DatasetNotFoundError, match="not found"):
            read_dir(tmp_path / "nope")


@pytest.mark.unit
class TestReadFile:
    """Tests for read_file."""

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading UTF-8 contents."""
        write_text(tmp_path / "README", "données\n")
        assert read_file(file_ref(tmp_path, "/README")) == "données\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that an unreadable file carries a FILE_READ issue."""
        with pytest.raises(FileReadError) as exc_info:
            read_file(file_ref(tmp_path, "/missing.tsv"))
        assert exc_info.value.issue.code == 44
        assert exc_info.value.issue.relative_path == "/missing.tsv"

    def test_no_content_handle(self) -> None:
        """Test that a synthetic reference cannot be read."""
        with pytest.raises(FileReadError) as exc_info:
            read_file(FileRef.missing("/participants.tsv"))
        assert exc_info.value.issue.code == 44


@pytest.mark.unit
class TestReadNiftiHeader:
    """Tests for read_nifti_header."""

    def test_gzipped_4d_image(self, tmp_path: Path) -> None:
        """Test decoding a gzipped BOLD header."""
        write_nifti(tmp_path / "bold.nii.gz", shape=(4, 4, 4, 5), voxel=(3.0, 3.0, 3.5), tr=2.0)
        header = read_nifti_header(file_ref(tmp_path, "/bold.nii.gz"))
        assert header.dim[:5] == [4, 4, 4, 4, 5]
        assert header.pixdim[1:5] == pytest.approx([3.0, 3.0, 3.5, 2.0])
        assert header.xyzt_units == ("mm", "sec")
        assert header.volume_count == 5

    def test_uncompressed_3d_image(self, tmp_path: Path) -> None:
        """Test decoding an uncompressed anatomical header."""
        write_nifti(tmp_path / "T1w.nii")
        header = read_nifti_header(file_ref(tmp_path, "/T1w.nii"))
        assert header.dim[0] == 3
        assert header.volume_count == 1

    def test_symlinked_image(self, tmp_path: Path) -> None:
        """Test that the size check follows symlinks to the image content."""
        write_nifti(tmp_path / "annex" / "objects" / "T1w.nii")
        link = tmp_path / "sub-01_T1w.nii"
        link.symlink_to(Path("annex") / "objects" / "T1w.nii")
        files = read_dir(tmp_path)
        ref = next(f for f in files if f.relative_path == "/sub-01_T1w.nii")
        assert ref.size < 348

        header = read_nifti_header(ref)
        assert header.dim[0] == 3

    def test_not_gzipped(self, tmp_path: Path) -> None:
        """Test a .gz file without gzip content."""
        (tmp_path / "x.nii.gz").write_bytes(b"\x00" * 400)
        with pytest.raises(NiftiHeaderError) as exc_info:
            read_nifti_header(file_ref(tmp_path, "/x.nii.gz"))
        assert exc_info.value.issue.code == 28

    def test_too_small(self, tmp_path: Path) -> None:
        """Test an uncompressed file shorter than a NIfTI header."""
        (tmp_path / "x.nii").write_bytes(b"\x00" * 100)
        with pytest.raises(NiftiHeaderError) as exc_info:
            read_nifti_header(file_ref(tmp_path, "/x.nii"))
        assert exc_info.value.issue.code == 36

    def test_unparsable_header(self, tmp_path: Path) -> None:
        """Test gzipped content that is not a NIfTI image."""
        (tmp_path / "x.nii.gz").write_bytes(gzip.compress(b"not an image"))
        with pytest.raises(NiftiHeaderError) as exc_info:
            read_nifti_header(file_ref(tmp_path, "/x.nii.gz"))
        assert exc_info.value.issue.code == 26

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Test that a file that cannot be opened is a FILE_READ issue."""
        missing = FileRef(relative_path="/x.nii", name="x.nii", size=400, path=tmp_path / "x.nii")
        with pytest.raises(NiftiHeaderError) as exc_info:
            read_nifti_header(missing)
        assert exc_info.value.issue.code == 44
