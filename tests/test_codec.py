"""Tests for value serialization and deserialization."""

from drive_tables.handlers.codec import deserialize, serialize, to_text
from drive_tables.handlers.models import FieldType, TableField

JSON_FIELD = TableField("meta", FieldType.JSON)
TEXT_FIELD = TableField("name", FieldType.TEXT)


class TestSerialize:
    """Test conversion to wire values."""

    def test_none_becomes_empty_string(self):
        """Should write None as an empty string, not "null"."""
        assert serialize(None, TEXT_FIELD) == ""
        assert serialize(None, JSON_FIELD) == ""
        assert serialize(None, None) == ""

    def test_json_field_object(self):
        """Should encode objects in JSON fields as compact JSON text."""
        assert serialize({"a": 1, "b": [1, 2]}, JSON_FIELD) == '{"a":1,"b":[1,2]}'

    def test_structured_value_in_untyped_field(self):
        """Should JSON-encode dicts and lists even when the field is not JSON."""
        assert serialize({"a": 1}, TEXT_FIELD) == '{"a":1}'
        assert serialize([1, "x"], None) == '[1,"x"]'

    def test_scalars_pass_through(self):
        """Should leave scalars unchanged."""
        assert serialize("Alice", TEXT_FIELD) == "Alice"
        assert serialize(5, TEXT_FIELD) == 5
        assert serialize(True, None) is True


class TestDeserialize:
    """Test conversion to typed values."""

    def test_json_field_text(self):
        """Should parse JSON text in JSON fields."""
        assert deserialize('{"a":1}', JSON_FIELD) == {"a": 1}
        assert deserialize("[1,2]", JSON_FIELD) == [1, 2]

    def test_malformed_json_kept_as_text(self):
        """Should keep malformed JSON as the original text."""
        assert deserialize("{not json", JSON_FIELD) == "{not json"

    def test_malformed_json_recorded(self):
        """Should record a warning for malformed JSON when a list is given."""
        warnings = []
        deserialize("{not json", JSON_FIELD, warnings, row_index=3)
        assert len(warnings) == 1
        assert warnings[0].row_index == 3
        assert warnings[0].field == "meta"

    def test_deeply_nested_json_kept_as_text(self):
        """Should treat JSON nested past the parser's depth limit as malformed."""
        value = "[" * 100_000
        warnings = []
        assert deserialize(value, JSON_FIELD, warnings, row_index=0) == value
        assert len(warnings) == 1

    def test_non_json_fields_pass_through(self):
        """Should not parse JSON-looking text in other fields."""
        assert deserialize('{"a":1}', TEXT_FIELD) == '{"a":1}'
        assert deserialize('{"a":1}', None) == '{"a":1}'

    def test_non_text_value_in_json_field(self):
        """Should leave already-decoded values alone."""
        assert deserialize({"a": 1}, JSON_FIELD) == {"a": 1}
        assert deserialize(None, JSON_FIELD) is None


class TestRoundTrip:
    """Test serialize followed by deserialize."""

    def test_scalar_round_trip(self):
        """Should return scalar values unchanged."""
        for value in ["Alice", "", 42, 1.5, False]:
            assert deserialize(serialize(value, TEXT_FIELD), TEXT_FIELD) == value

    def test_json_object_round_trip(self):
        """Should deep-equal the original object."""
        value = {"tags": ["a", "b"], "nested": {"n": 1, "ok": True, "none": None}}
        assert deserialize(serialize(value, JSON_FIELD), JSON_FIELD) == value


class TestToText:
    """Test string coercion used for matching."""

    def test_none(self):
        assert to_text(None) == ""

    def test_booleans_lowercase(self):
        """Should render booleans the way sheets and CSV files store them."""
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_numbers(self):
        """Should drop the fraction of integral floats."""
        assert to_text(5) == "5"
        assert to_text(5.0) == "5"
        assert to_text(2.5) == "2.5"

    def test_structured(self):
        assert to_text({"a": 1}) == '{"a":1}'
