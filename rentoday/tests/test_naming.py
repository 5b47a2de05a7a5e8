"""Unit tests for timestamp name generation."""

import re
from datetime import datetime
from pathlib import Path

import pytest

from rentoday.naming import format_timestamp, new_file_name, resolve_prefix


TIMESTAMP_PATTERN = re.compile(r"^\d{8}_\d{6}_\d{3}$")


@pytest.fixture
def fixed_now():
    """2002-02-28 13:42:28.623"""
    return datetime(2002, 2, 28, 13, 42, 28, 623456)


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_format(self, fixed_now):
        """Test the yyyyMMdd_HHmmss_fff layout."""
        assert format_timestamp(fixed_now) == "20020228_134228_623"

    def test_zero_padding(self):
        """Test that single digit fields are zero padded."""
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 6000)) == "20240102_030405_006"

    def test_milliseconds_truncated(self):
        """Test that microseconds are truncated, not rounded."""
        assert format_timestamp(datetime(2024, 1, 1, 0, 0, 0, 999999)) == "20240101_000000_999"

    def test_matches_pattern_for_current_time(self):
        """Test the format for the real clock."""
        assert TIMESTAMP_PATTERN.match(format_timestamp(datetime.now()))


class TestResolvePrefix:
    """Tests for resolve_prefix."""

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            (None, ""),
            ("", ""),
            ("MyPrefix_", "MyPrefix_"),
            ("MyPrefix_*_", "MyPrefix_myfile_"),
            ("*", "myfile"),
            ("*_*_", "myfile_myfile_"),
        ],
    )
    def test_resolve(self, prefix, expected):
        assert resolve_prefix(prefix, "myfile") == expected


class TestNewFileName:
    """Tests for new_file_name."""

    def test_static_prefix(self, fixed_now):
        """Test the documented static prefix example."""
        result = new_file_name(Path("/data/myfile.txt"), "MyPrefix_", now=fixed_now)

        assert result == Path("/data/MyPrefix_20020228_134228_623.txt")

    def test_wildcard_prefix(self, fixed_now):
        """Test the documented wildcard prefix example."""
        result = new_file_name(Path("/data/myfile.txt"), "MyPrefix_*_", now=fixed_now)

        assert result == Path("/data/MyPrefix_myfile_20020228_134228_623.txt")

    def test_no_prefix(self, fixed_now):
        """Test that without a prefix the name is the timestamp alone."""
        result = new_file_name(Path("/data/myfile.txt"), now=fixed_now)

        assert result.name == "20020228_134228_623.txt"

    def test_preserves_directory_and_extension(self, fixed_now):
        """Test that only the base name changes."""
        source = Path("relative/path/archive.tar.gz")

        result = new_file_name(source, "x_", now=fixed_now)

        assert result.parent == source.parent
        assert result.suffix == ".gz"
        assert result.name == "x_20020228_134228_623.gz"

    def test_no_extension(self, fixed_now):
        """Test files without extension."""
        result = new_file_name(Path("/data/README"), now=fixed_now)

        assert result == Path("/data/20020228_134228_623")

    def test_directory_containing_base_name_untouched(self, fixed_now):
        """Test that a directory named like the file is not rewritten."""
        result = new_file_name(Path("/report/report.txt"), now=fixed_now)

        assert result == Path("/report/20020228_134228_623.txt")

    def test_defaults_to_current_time(self):
        """Test that the clock is read when no time is given."""
        result = new_file_name(Path("/data/myfile.txt"), "p_")

        assert result.name.startswith("p_")
        assert TIMESTAMP_PATTERN.match(result.stem[len("p_") :])
