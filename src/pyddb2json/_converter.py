"""Core Converter class - recursive type-tag dispatch over an attribute tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pyddb2json._constants import DEFAULT_MAX_RECURSION_DEPTH
from pyddb2json._errors import ERR_MSG_DEPTH_EXCEEDED, MaxDepthExceededError, format_path
from pyddb2json._types import AttributeMap, AttributeValue, DataType, JSONObject, JSONValue, data_type
from pyddb2json._utils import encode_binary

logger = logging.getLogger(__name__)

Path = tuple[str, ...]


class Converter:
    """Converts a mapping of tagged attribute values into a JSON value tree.

    Null-valued fields are dropped from every mapping they appear in, at any
    depth. Inside a List a Null element is kept as ``None`` so that element
    positions are preserved.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_RECURSION_DEPTH) -> None:
        self._max_depth = max_depth
        self._depth = 0
        self._handlers: dict[DataType, Callable[[Any, Path], JSONValue]] = {
            DataType.BINARY: self._binary,
            DataType.BINARY_SET: self._binary_set,
            DataType.BOOLEAN: self._passthrough,
            DataType.LIST: self._list,
            DataType.MAP: self._map,
            DataType.NULL: self._null,
            DataType.NUMBER: self._passthrough,
            DataType.NUMBER_SET: self._sequence,
            DataType.STRING: self._passthrough,
            DataType.STRING_SET: self._sequence,
        }

    def _check_limits(self, path: Path) -> None:
        if self._depth > self._max_depth:
            raise MaxDepthExceededError(
                ERR_MSG_DEPTH_EXCEEDED,
                f"depth {self._depth} at {format_path(path)} exceeds limit {self._max_depth}",
                path=path,
            )

    def _visit_child(self, convert: Callable[[Any, Path], JSONValue], value: Any, path: Path) -> JSONValue:
        """Convert a container payload, incrementing depth."""
        self._depth += 1
        try:
            self._check_limits(path)
            return convert(value, path)
        finally:
            self._depth -= 1

    # ---- Entry points ----

    def convert_map(self, attrs: AttributeMap, path: Path = ()) -> JSONObject:
        """Convert every entry of ``attrs``, leaving out fields that convert to null."""
        result: JSONObject = {}
        for key, attr in attrs.items():
            field_path = (*path, str(key))
            value = self.convert_field(attr, field_path)
            if value is None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Dropping null field %s", format_path(field_path))
                continue
            result[key] = value
        return result

    def convert_field(self, attr: AttributeValue, path: Path) -> JSONValue:
        """Convert a single tagged attribute value."""
        tag = data_type(attr, path)
        return self._handlers[tag](attr[tag], path)

    # ---- Scalars ----

    @staticmethod
    def _passthrough(value: Any, path: Path) -> JSONValue:
        return value

    @staticmethod
    def _null(value: Any, path: Path) -> JSONValue:
        return None

    @staticmethod
    def _binary(value: Any, path: Path) -> JSONValue:
        return encode_binary(value)

    # ---- Sets ----

    @staticmethod
    def _sequence(value: Any, path: Path) -> JSONValue:
        return list(value)

    @staticmethod
    def _binary_set(value: Any, path: Path) -> JSONValue:
        return [encode_binary(item) for item in value]

    # ---- Containers ----

    def _list(self, value: Any, path: Path) -> JSONValue:
        return self._visit_child(self._list_items, value, path)

    def _list_items(self, items: Any, path: Path) -> JSONValue:
        return [self.convert_field(item, (*path, str(i))) for i, item in enumerate(items)]

    def _map(self, value: Any, path: Path) -> JSONValue:
        return self._visit_child(self.convert_map, value, path)
