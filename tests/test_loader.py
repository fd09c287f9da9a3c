"""
Unit tests for the YAML record loader.

Run with: pytest tests/test_loader.py -v
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_validator.loader import load_records, RecordLoadError
from iso_validator.models import FieldValue


EXAMPLE_FILE = Path(__file__).parent.parent / "config" / "records.yaml.example"


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a temporary file and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "records.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


class TestLoadRecords:
    """Tests for successful loads."""

    def test_plain_list(self, write_yaml):
        """Test a top-level list of records."""
        path = write_yaml(
            '- bit02: "1234"\n'
            '  bit04: "02"\n'
            '- bit02: ""\n'
        )

        records = load_records(path)

        assert len(records) == 2
        assert records[0].bit04 == FieldValue("02")
        assert records[1].bit02 == FieldValue("")
        assert records[1].bit04 is None

    def test_records_key(self, write_yaml):
        """Test a mapping with a records list."""
        path = write_yaml('records:\n  - bit02: "1234"\n')

        records = load_records(path)

        assert [r.to_dict() for r in records] == [{"bit02": "1234"}]

    def test_empty_file(self, write_yaml):
        """Test that an empty file gives no records."""
        assert load_records(write_yaml("")) == []

    def test_empty_records_key(self, write_yaml):
        """Test that an empty records key gives no records."""
        assert load_records(write_yaml("records:\n")) == []

    def test_accepts_string_path(self, write_yaml):
        """Test passing the path as a string."""
        path = write_yaml('- bit02: "1"\n')

        assert len(load_records(str(path))) == 1

    def test_example_file(self):
        """Test that the shipped example file loads."""
        records = load_records(EXAMPLE_FILE)

        assert len(records) == 6


class TestLoadRecordsErrors:
    """Tests for load failures."""

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises RecordLoadError."""
        with pytest.raises(RecordLoadError, match="not found"):
            load_records(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_yaml):
        """Test that broken YAML raises RecordLoadError."""
        with pytest.raises(RecordLoadError, match="Invalid YAML"):
            load_records(write_yaml("records: [\n"))

    def test_mapping_without_records_key(self, write_yaml):
        """Test that a mapping needs a records key."""
        with pytest.raises(RecordLoadError, match="records"):
            load_records(write_yaml('bit02: "1234"\n'))

    def test_scalar_top_level(self, write_yaml):
        """Test that a scalar document is rejected."""
        with pytest.raises(RecordLoadError, match="Expected a list"):
            load_records(write_yaml("hello\n"))

    def test_record_not_mapping(self, write_yaml):
        """Test that every record must be a mapping."""
        with pytest.raises(RecordLoadError, match="Record 1"):
            load_records(write_yaml('- bit02: "1"\n- just text\n'))

    def test_unquoted_type_code(self, write_yaml):
        """Test that an unquoted 02 (read as an int) is rejected."""
        with pytest.raises(RecordLoadError, match="Record 0.*bit04"):
            load_records(write_yaml('- bit02: "1"\n  bit04: 02\n'))

    def test_unknown_field(self, write_yaml):
        """Test that an unknown bit is rejected."""
        with pytest.raises(RecordLoadError, match="Unknown fields"):
            load_records(write_yaml('- bit07: "1"\n'))

    def test_invalid_utf8(self, tmp_path):
        """Test that undecodable bytes raise RecordLoadError."""
        path = tmp_path / "records.yaml"
        path.write_bytes(b"\xff\xfe- bit02: \"1\"\n")

        with pytest.raises(RecordLoadError, match="Cannot read"):
            load_records(path)

    def test_directory_path(self, tmp_path):
        """Test that a directory instead of a file raises RecordLoadError."""
        with pytest.raises(RecordLoadError, match="Cannot read"):
            load_records(tmp_path)

    def test_mixed_type_unknown_keys(self, write_yaml):
        """Test that unknown keys of mixed types are still reported."""
        path = write_yaml('records:\n  - {1: "a", foo: "b", bit02: "x"}\n')

        with pytest.raises(RecordLoadError, match="Unknown fields"):
            load_records(path)
