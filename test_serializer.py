"""Tests for the record serializer."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any

import pytest
from jsonapi_assert import SerializationError, assert_data, s, serialize


@dataclass
class Author:
    id: int = None
    first_name: str = None
    last_name: str = None


@dataclass
class Writer:
    other_id: int = None
    first_name: str = None
    last_name: str = None


@dataclass
class BlogPost:
    id: int = None
    created_at: Any = None


class Comment:
    def __init__(self, id, body):
        self.id = id
        self.body = body


AUTHOR_ATTRIBUTES = {"first-name": "Douglas", "last-name": "Engelbart"}


class TestSerialize:
    """Test serialize."""

    def setup_method(self):
        self.author = Author(id=1, first_name="Douglas", last_name="Engelbart")

    def test_dataclass(self):
        """Test serializing a dataclass record."""
        assert serialize(self.author) == {
            "id": "1",
            "type": "author",
            "attributes": AUTHOR_ATTRIBUTES,
        }

    def test_mapping(self):
        """Test serializing a mapping with an explicit type."""
        record = {"id": 1, "first_name": "Douglas", "last_name": "Engelbart"}
        assert serialize(record, type="author") == {
            "id": "1",
            "type": "author",
            "attributes": AUTHOR_ATTRIBUTES,
        }

    def test_mapping_without_type(self):
        """Test that a mapping needs a type."""
        with pytest.raises(SerializationError) as excinfo:
            serialize({"id": 1, "first_name": "Douglas"})

        assert excinfo.value.message == (
            "No type can be derived from record. Please pass a type to `serialize`."
        )

    def test_serialization_error_is_value_error(self):
        """Test that callers may catch ValueError."""
        with pytest.raises(ValueError):
            serialize({"id": 1})

    def test_plain_object(self):
        """Test serializing a plain object."""
        assert serialize(Comment(3, "Nice")) == {
            "id": "3",
            "type": "comment",
            "attributes": {"body": "Nice"},
        }

    def test_type_from_camel_case(self):
        """Test that class names become snake_case types."""
        assert serialize(BlogPost(id=1))["type"] == "blog_post"

    def test_override_type(self):
        """Test the type option."""
        assert serialize(self.author, type="writers")["type"] == "writers"

    def test_primary_key(self):
        """Test the primary_key option, which is not an attribute."""
        writer = Writer(other_id=1, first_name="Douglas", last_name="Engelbart")
        assert serialize(writer, primary_key="other_id") == {
            "id": "1",
            "type": "writer",
            "attributes": AUTHOR_ATTRIBUTES,
        }

    def test_except(self):
        """Test excluding attributes."""
        assert serialize(self.author, except_=["first_name"])["attributes"] == {
            "last-name": "Engelbart"
        }

    def test_only(self):
        """Test limiting attributes."""
        assert serialize(self.author, only=["first_name"])["attributes"] == {
            "first-name": "Douglas"
        }

    def test_except_wins_over_only(self):
        """Test that except_ takes precedence."""
        attributes = serialize(self.author, except_=["first_name"], only=["first_name"])["attributes"]
        assert attributes == {"last-name": "Engelbart"}

    def test_shortened_alias(self):
        """Test the s alias and its options."""
        assert s(self.author) == serialize(self.author)
        assert s(self.author, type="writers")["type"] == "writers"

    def test_missing_id(self):
        """Test a record without an id value."""
        assert serialize(Author(first_name="Douglas"))["id"] == ""

    @pytest.mark.parametrize("value, expected", [
        (datetime(2016, 1, 1, 0, 0, 0), "2016-01-01T00:00:00"),
        (datetime(2016, 1, 1, 0, 0, 0, tzinfo=timezone.utc), "2016-01-01T00:00:00Z"),
        (time(0, 0, 0), "00:00:00"),
        (date(2016, 1, 1), "2016-01-01"),
    ])
    def test_temporal_values(self, value, expected):
        """Test ISO 8601 rendering of date and time values."""
        assert serialize(BlogPost(id=1, created_at=value))["attributes"] == {
            "created-at": expected
        }

    def test_serialized_record_asserts(self):
        """Test that serialized records feed straight into assertions."""
        author = Author(id=1, first_name="Douglas", last_name="Engelbart")
        document = {"data": serialize(author)}
        assert assert_data(document, s(author)) is document
