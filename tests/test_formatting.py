"""Test cases for the output formatting helpers."""

from utils.formatting import format_size, get_files_size, pluralize


def test_format_size():
    """Test human-readable sizes."""
    assert format_size(0) == "0 B"
    assert format_size(512) == "512.00 B"
    assert format_size(2048) == "2.00 KB"


def test_get_files_size(tmp_path):
    """Test sizes are summed and unreadable files count as zero."""
    (tmp_path / "a.c").write_text("abc")
    (tmp_path / "b.h").write_text("de")
    paths = [str(tmp_path / "a.c"), str(tmp_path / "b.h"), str(tmp_path / "gone.c")]
    assert get_files_size(paths) == 5


def test_pluralize():
    """Test singular and plural nouns."""
    assert pluralize(1, "file") == "1 file"
    assert pluralize(0, "file") == "0 files"
    assert pluralize(3, "file") == "3 files"
