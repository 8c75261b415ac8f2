"""Tests for row matching, key validation and header growth."""

from drive_tables.handlers.models import FieldType, Table, TableField
from drive_tables.handlers.rows import (
    find_row_index,
    has_valid_keys,
    header_superset,
    key_fields,
    merge_rows,
)


class TestFindRowIndex:
    """Test locating rows by key."""

    def test_matches_by_string_coercion(self):
        """Should match a numeric key against stored text."""
        rows = [{"id": "4"}, {"id": "5"}]
        assert find_row_index(rows, {"id": 5}) == 1

    def test_matches_text_key_against_number(self):
        """Should match a text key against a stored number."""
        assert find_row_index([{"id": 1, "name": "Alice"}], {"id": "1"}) == 0

    def test_boolean_key(self):
        """Should match booleans against their lowercase text."""
        assert find_row_index([{"active": "true"}], {"active": True}) == 0

    def test_composite_key(self):
        """Should require every key entry to match."""
        rows = [
            {"org": "a", "id": "1"},
            {"org": "b", "id": "1"},
        ]
        assert find_row_index(rows, {"org": "b", "id": 1}) == 1
        assert find_row_index(rows, {"org": "c", "id": 1}) == -1

    def test_duplicates_resolve_to_first(self):
        """Should return the earliest of duplicate matches."""
        rows = [{"id": "1", "n": "a"}, {"id": "1", "n": "b"}]
        assert find_row_index(rows, {"id": "1"}) == 0

    def test_not_found(self):
        assert find_row_index([{"id": "1"}], {"id": "2"}) == -1
        assert find_row_index([], {"id": "1"}) == -1


class TestKeyFields:
    """Test key field extraction and validation."""

    def test_key_fields_in_schema_order(self):
        table = Table(
            id="t",
            name="t",
            path=["csv", "x"],
            fields=[
                TableField("org", FieldType.TEXT, is_key=True),
                TableField("name"),
                TableField("id", FieldType.NUMBER, is_key=True),
            ],
        )
        assert key_fields(table) == ["org", "id"]

    def test_no_key_fields_accepts_everything(self):
        """Should accept any row when no key is declared."""
        assert has_valid_keys({}, []) is True
        assert has_valid_keys({"id": ""}, []) is True

    def test_missing_null_and_blank_rejected(self):
        """Should reject rows with missing, null or blank key values."""
        assert has_valid_keys({"name": "x"}, ["id"]) is False
        assert has_valid_keys({"id": None}, ["id"]) is False
        assert has_valid_keys({"id": ""}, ["id"]) is False
        assert has_valid_keys({"id": "   "}, ["id"]) is False

    def test_filled_keys_accepted(self):
        """Should accept rows whose keys are filled, including 0 and False."""
        assert has_valid_keys({"id": "1"}, ["id"]) is True
        assert has_valid_keys({"id": 0}, ["id"]) is True
        assert has_valid_keys({"id": False}, ["id"]) is True

    def test_every_key_required(self):
        assert has_valid_keys({"org": "a", "id": ""}, ["org", "id"]) is False
        assert has_valid_keys({"org": "a", "id": "1"}, ["org", "id"]) is True


class TestHeaderGrowth:
    """Test header superset and row merge."""

    def test_new_keys_appended_in_order(self):
        """Should keep existing order and append unseen keys."""
        assert header_superset(["id", "name"], {"tag": 1, "id": 2, "email": 3}) == [
            "id",
            "name",
            "tag",
            "email",
        ]

    def test_no_new_keys(self):
        assert header_superset(["id", "name"], {"name": "x"}) == ["id", "name"]

    def test_merge_update_wins(self):
        """Should let the update win on collisions."""
        merged = merge_rows({"id": "1", "name": "Alice"}, {"name": "Alicia", "email": "a@x.com"})
        assert merged == {"id": "1", "name": "Alicia", "email": "a@x.com"}
