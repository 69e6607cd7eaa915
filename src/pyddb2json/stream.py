"""Helpers for converting DynamoDB stream records.

A stream-triggered Lambda receives ``event["Records"]``; each record carries
its item images under ``record["dynamodb"]``. These helpers pick an image and
run it through :func:`pyddb2json.convert`.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any

from pyddb2json import convert
from pyddb2json._errors import (
    ERR_MSG_INVALID_STREAM_RECORD,
    InvalidStreamRecordError,
    SerializationError,
)
from pyddb2json._types import AttributeMap

logger = logging.getLogger(__name__)

__all__ = [
    "StreamImage",
    "convert_record",
    "convert_records",
    "record_image",
]


class StreamImage(enum.StrEnum):
    NEW_IMAGE = "NewImage"
    OLD_IMAGE = "OldImage"
    KEYS = "Keys"


def record_image(
    record: Mapping[str, Any],
    image: StreamImage = StreamImage.NEW_IMAGE,
) -> AttributeMap | None:
    """Return one image of a stream record, or None if the record lacks it.

    ``NewImage`` is absent on REMOVE events and ``OldImage`` on INSERT events,
    and either may be missing depending on the stream view type.

    Raises:
        InvalidStreamRecordError: If the record has no ``dynamodb`` section.
    """
    section = record.get("dynamodb")
    if not isinstance(section, Mapping):
        raise InvalidStreamRecordError(
            ERR_MSG_INVALID_STREAM_RECORD,
            f"record {record.get('eventID', '<unknown>')} has no dynamodb section",
        )
    return section.get(StreamImage(image).value)


def convert_record(
    record: Mapping[str, Any],
    image: StreamImage = StreamImage.NEW_IMAGE,
    *,
    max_depth: int | None = None,
) -> bytes | None:
    """Convert one image of a stream record to JSON, or return None if it is absent."""
    attributes = record_image(record, image)
    if attributes is None:
        return None
    return convert(attributes, max_depth=max_depth)


def convert_records(
    event: Mapping[str, Any],
    image: StreamImage = StreamImage.NEW_IMAGE,
    *,
    max_depth: int | None = None,
    skip_errors: bool = False,
) -> list[bytes]:
    """Convert the chosen image of every record in a stream event, in order.

    Records without that image are skipped. With ``skip_errors``, a record
    whose converted image cannot be serialized is logged and skipped instead
    of failing the batch. Malformed attributes always propagate.
    """
    documents: list[bytes] = []
    for record in event.get("Records") or []:
        event_id = record.get("eventID", "<unknown>")
        try:
            document = convert_record(record, image, max_depth=max_depth)
        except SerializationError as e:
            if not skip_errors:
                raise
            logger.warning("Skipping record %s: %s", event_id, e.internal())
            continue
        if document is None:
            logger.debug("Record %s (%s) has no %s", event_id, record.get("eventName"), image)
            continue
        documents.append(document)
    return documents
