"""Payload encoding helpers and the canonical JSON encoder."""

from __future__ import annotations

import base64
import json
from typing import Any

from boto3.dynamodb.types import Binary

from pyddb2json._constants import JSON_SEPARATORS
from pyddb2json._errors import ERR_MSG_SERIALIZATION_FAILED, SerializationError

BINARY_TYPES = (bytes, bytearray, memoryview)


def encode_binary(value: Any) -> Any:
    """Encode a binary payload as a standard base64 string.

    Stream events deliver ``B`` payloads already base64-encoded, so a
    ``str`` passes through. Anything else that is not bytes-like is
    returned untouched and left to the JSON encoder.
    """
    if isinstance(value, Binary):
        value = value.value
    if isinstance(value, BINARY_TYPES):
        return base64.b64encode(value).decode("ascii")
    return value


def encode_json(value: Any) -> bytes:
    """Serialize a converted value tree to compact UTF-8 JSON with sorted keys."""
    try:
        return json.dumps(
            value,
            sort_keys=True,
            separators=JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            ERR_MSG_SERIALIZATION_FAILED,
            f"json encoder rejected converted value: {e}",
            wrapped=e,
        ) from e
