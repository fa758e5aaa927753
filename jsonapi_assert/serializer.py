"""Basic record serializer producing JSON:API resource objects."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, time, timezone
from typing import Any, Iterable, Mapping, Optional

from . import messages
from .exceptions import SerializationError
from .utils import dasherize, underscore


def record_fields(record: Any) -> dict:
    """
    Read a record's fields in declaration order.

    Supports mappings, dataclass instances and plain objects.
    """
    if isinstance(record, Mapping):
        return dict(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    try:
        return dict(vars(record))
    except TypeError:
        raise SerializationError(f"Cannot read fields from {type(record).__name__}")


def serialize_value(value: Any) -> Any:
    """Render date and time values as ISO 8601 strings."""
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() == timezone.utc.utcoffset(None):
            return value.replace(tzinfo=None).isoformat() + "Z"
        return value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return value


def serialize(
    record: Any,
    type: Optional[str] = None,
    primary_key: Optional[str] = None,
    only: Optional[Iterable[str]] = None,
    except_: Optional[Iterable[str]] = None,
) -> dict:
    """
    Serialize a record into a JSON:API resource object.

        serialize(Author(id=1, first_name="Douglas", last_name="Engelbart"))

        # {"id": "1", "type": "author",
        #  "attributes": {"first-name": "Douglas", "last-name": "Engelbart"}}

    Args:
        record: Dataclass instance, plain object, or mapping
        type: Resource type; derived from the class name when omitted
            (required for mappings)
        primary_key: Field holding the id, defaults to "id"
        only: Limit attributes to these fields
        except_: Exclude these fields; wins over `only`

    Returns:
        Resource object with string id, type and dasherized attributes
    """
    fields = record_fields(record)
    primary_key = str(primary_key or "id")

    identifier = fields.get(primary_key)
    resource = {
        "id": "" if identifier is None else str(identifier),
        "type": type or _derive_type(record),
        "attributes": _attributes(fields, primary_key, only, except_),
    }
    return resource


# Shortened alias
s = serialize


def _derive_type(record: Any) -> str:
    if isinstance(record, Mapping):
        raise SerializationError(messages.UNDERIVABLE_TYPE)
    return underscore(record.__class__.__name__)


def _attributes(
    fields: dict,
    primary_key: str,
    only: Optional[Iterable[str]],
    except_: Optional[Iterable[str]],
) -> dict:
    excluded = {str(key) for key in (except_ or [])}
    excluded.add(primary_key)
    allowed = {str(key) for key in (only or [])} - excluded

    attributes = {}
    for key, value in fields.items():
        if str(key) in excluded:
            continue
        if allowed and str(key) not in allowed:
            continue
        attributes[dasherize(key)] = serialize_value(value)
    return attributes
