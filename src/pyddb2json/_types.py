"""Attribute type tags and type aliases for the input and output trees.

The tag strings are DynamoDB's own type descriptors, as exported by
``boto3.dynamodb.types``. An attribute value is the low-level client (and
stream record) shape: a one-entry mapping from descriptor to payload, e.g.
``{"N": "72.99"}`` or ``{"L": [{"BOOL": True}]}``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, TypeAlias

from boto3.dynamodb.types import (
    BINARY,
    BINARY_SET,
    BOOLEAN,
    LIST,
    MAP,
    NULL,
    NUMBER,
    NUMBER_SET,
    STRING,
    STRING_SET,
)

from pyddb2json._errors import (
    ERR_MSG_MALFORMED_ATTRIBUTE,
    ERR_MSG_UNKNOWN_TYPE,
    MalformedAttributeError,
    format_path,
)


class DataType(enum.StrEnum):
    NULL = NULL
    BOOLEAN = BOOLEAN
    NUMBER = NUMBER
    STRING = STRING
    BINARY = BINARY
    NUMBER_SET = NUMBER_SET
    STRING_SET = STRING_SET
    BINARY_SET = BINARY_SET
    LIST = LIST
    MAP = MAP


AttributeValue: TypeAlias = "Mapping[str, Any]"
"""A tagged attribute value: exactly one ``DataType`` key mapped to its payload."""

AttributeMap: TypeAlias = "Mapping[str, AttributeValue]"
"""Field name to tagged attribute value, e.g. a stream record's ``NewImage``."""

JSONValue: TypeAlias = "str | bool | None | list[JSONValue] | dict[str, JSONValue]"
"""A converted value. Numbers stay strings, so there is no numeric member."""

JSONObject: TypeAlias = "dict[str, JSONValue]"


_TAGS = frozenset(DataType)


def data_type(attr: Any, path: tuple[str, ...] = ()) -> DataType:
    """Return the type tag of an attribute value.

    Args:
        attr: The tagged attribute value.
        path: Field path of the value, reported if it is malformed.

    Raises:
        MalformedAttributeError: If ``attr`` is not a mapping or does not
            carry exactly one tag from the closed ``DataType`` set.
    """
    if not isinstance(attr, Mapping):
        raise MalformedAttributeError(
            ERR_MSG_MALFORMED_ATTRIBUTE,
            f"attribute at {format_path(path)} is a {type(attr).__name__}, not a tagged mapping",
            path=path,
        )
    if len(attr) != 1:
        raise MalformedAttributeError(
            ERR_MSG_MALFORMED_ATTRIBUTE,
            f"attribute at {format_path(path)} has {len(attr)} type tags {sorted(map(str, attr))}",
            path=path,
        )
    (tag,) = attr
    if tag not in _TAGS:
        raise MalformedAttributeError(
            ERR_MSG_UNKNOWN_TYPE,
            f"attribute at {format_path(path)} had unknown attribute type of {tag!r}",
            path=path,
        )
    return DataType(tag)
