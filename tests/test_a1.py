"""Tests for A1 notation helpers."""

import pytest

from drive_tables.sheets.a1 import a1_range, column_index, column_letter


class TestColumnLetter:
    """Test column index to letter translation."""

    @pytest.mark.parametrize(
        "index,letters",
        [(1, "A"), (2, "B"), (26, "Z"), (27, "AA"), (28, "AB"), (52, "AZ"), (53, "BA"), (702, "ZZ"), (703, "AAA")],
    )
    def test_letters(self, index, letters):
        assert column_letter(index) == letters

    def test_round_trip_with_index(self):
        """Should invert column_index."""
        for index in range(1, 1000):
            assert column_index(column_letter(index)) == index

    def test_zero_rejected(self):
        with pytest.raises(ValueError):
            column_letter(0)


class TestColumnIndex:
    """Test letter to column index translation."""

    def test_index(self):
        assert column_index("A") == 1
        assert column_index("ZZ") == 702
        assert column_index("bx") == 76

    def test_invalid(self):
        with pytest.raises(ValueError):
            column_index("A1")


class TestA1Range:
    """Test range building."""

    def test_whole_sheet(self):
        assert a1_range("Sheet1") == "'Sheet1'"

    def test_single_cell(self):
        assert a1_range("Sheet1", "C1") == "'Sheet1'!C1"

    def test_bounded(self):
        assert a1_range("My Sheet", "A3", "ZZ3") == "'My Sheet'!A3:ZZ3"

    def test_quoted_title(self):
        assert a1_range("Bob's", "A1") == "'Bob''s'!A1"
