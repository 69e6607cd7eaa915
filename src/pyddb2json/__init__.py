"""pyddb2json - Convert DynamoDB attribute values to JSON."""

from __future__ import annotations

from importlib.metadata import version

from pyddb2json._constants import DEFAULT_MAX_RECURSION_DEPTH
from pyddb2json._converter import Converter
from pyddb2json._errors import (
    ConversionError,
    InvalidStreamRecordError,
    MalformedAttributeError,
    MaxDepthExceededError,
    SerializationError,
)
from pyddb2json._types import AttributeMap, AttributeValue, DataType, JSONObject, JSONValue, data_type
from pyddb2json._utils import encode_json

__version__ = version("pyddb2json")

__all__ = [
    "convert",
    "convert_to_value",
    "data_type",
    "AttributeMap",
    "AttributeValue",
    "DataType",
    "JSONObject",
    "JSONValue",
    "ConversionError",
    "InvalidStreamRecordError",
    "MalformedAttributeError",
    "MaxDepthExceededError",
    "SerializationError",
    "__version__",
]


def convert_to_value(
    attributes: AttributeMap,
    *,
    max_depth: int | None = None,
) -> JSONObject:
    """Convert a mapping of DynamoDB attribute values to a JSON-compatible dict.

    Numbers stay strings, binaries become base64 strings, sets become lists
    in iteration order, and fields holding Null are left out.

    Args:
        attributes: Field name to tagged attribute value, e.g.
            ``{"id": {"S": "abc"}, "price": {"N": "72.99"}}``.
        max_depth: Maximum List/Map nesting depth. Defaults to 100.

    Returns:
        The converted mapping.

    Raises:
        MalformedAttributeError: If a value does not carry exactly one known
            type tag. The error's ``field_path`` locates it.
        MaxDepthExceededError: If the tree is nested deeper than ``max_depth``.
    """
    if max_depth is None:
        max_depth = DEFAULT_MAX_RECURSION_DEPTH
    return Converter(max_depth).convert_map(attributes)


def convert(
    attributes: AttributeMap,
    *,
    max_depth: int | None = None,
) -> bytes:
    """Convert a mapping of DynamoDB attribute values to a JSON document.

    The output is compact UTF-8 JSON with object keys sorted, so equal
    inputs always produce identical bytes.

    Args:
        attributes: Field name to tagged attribute value.
        max_depth: Maximum List/Map nesting depth. Defaults to 100.

    Returns:
        The JSON document as bytes.

    Raises:
        MalformedAttributeError: If a value does not carry exactly one known
            type tag.
        MaxDepthExceededError: If the tree is nested deeper than ``max_depth``.
        SerializationError: If the converted tree cannot be encoded.
    """
    return encode_json(convert_to_value(attributes, max_depth=max_depth))
