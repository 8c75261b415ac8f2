"""Tests for identifier, sheet name and path validation."""

import pytest

from drive_tables.handlers.exceptions import (
    InvalidFileIdError,
    InvalidInputError,
    InvalidPathError,
    InvalidSheetNameError,
)
from drive_tables.handlers.validation import parse_path, validate_file_id
from drive_tables.sheets.a1 import escape_sheet_name


class TestValidateFileId:
    """Test file ID validation."""

    def test_valid_ids(self):
        """Should accept Drive-style IDs."""
        validate_file_id("1AbC_dEf-123")
        validate_file_id("a" * 100)

    def test_empty(self):
        with pytest.raises(InvalidFileIdError, match="required"):
            validate_file_id("")

    def test_too_long(self):
        with pytest.raises(InvalidFileIdError, match="maximum length"):
            validate_file_id("a" * 101)

    @pytest.mark.parametrize("file_id", ["abc/def", "abc'def", "abc def", "abc?x=1", "ü"])
    def test_bad_characters(self, file_id):
        """Should reject characters outside [A-Za-z0-9_-]."""
        with pytest.raises(InvalidFileIdError, match="Invalid file ID format"):
            validate_file_id(file_id)

    def test_is_value_error(self):
        """Should be catchable as InvalidInputError and ValueError."""
        with pytest.raises(InvalidInputError):
            validate_file_id("")
        with pytest.raises(ValueError):
            validate_file_id("")


class TestEscapeSheetName:
    """Test sheet name quoting."""

    def test_plain_name(self):
        assert escape_sheet_name("Sheet1") == "'Sheet1'"

    def test_spaces(self):
        assert escape_sheet_name("My Data") == "'My Data'"

    def test_quotes_doubled(self):
        """Should double embedded quotes so they cannot close the quoting."""
        assert escape_sheet_name("Bob's") == "'Bob''s'"
        assert escape_sheet_name("x'!A1:B2") == "'x''!A1:B2'"

    def test_empty(self):
        with pytest.raises(InvalidSheetNameError):
            escape_sheet_name("")


class TestParsePath:
    """Test path parsing."""

    def test_file_path(self):
        path = parse_path(["csv", "abc123"], ("csv", "tsv"), "get_data")
        assert path.resource_type == "csv"
        assert path.file_id == "abc123"
        assert path.sheet_name is None

    def test_sheet_path(self):
        path = parse_path(["spreadsheet", "abc", "Sheet 1"], ("spreadsheet",), "add_row", True)
        assert path.sheet_name == "Sheet 1"

    def test_wrong_type_names_expected(self):
        """Should say which resource type was expected."""
        with pytest.raises(InvalidPathError, match="'json', file_id") as exc_info:
            parse_path(["csv", "abc"], ("json",), "add_row")
        assert exc_info.value.operation == "add_row"

    def test_missing_file_id(self):
        with pytest.raises(InvalidPathError):
            parse_path(["csv"], ("csv",), "get_data")
        with pytest.raises(InvalidPathError):
            parse_path(["csv", ""], ("csv",), "get_data")

    def test_missing_sheet(self):
        """Should require the sheet segment when asked."""
        with pytest.raises(InvalidPathError, match="sheet_name"):
            parse_path(["spreadsheet", "abc"], ("spreadsheet",), "update_row", True)

    def test_empty_path(self):
        with pytest.raises(InvalidPathError):
            parse_path([], ("csv",), "get_data")

    def test_bad_file_id(self):
        with pytest.raises(InvalidFileIdError):
            parse_path(["csv", "../etc"], ("csv",), "get_data")
