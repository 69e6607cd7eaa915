"""Exception hierarchy for attribute-to-JSON conversion."""

from __future__ import annotations

from pyddb2json._constants import PATH_SEPARATOR


class ConversionError(Exception):
    """Base exception for attribute-to-JSON conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. Attribute names and payloads only
    ever appear in the internal details.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class _PathError(ConversionError):
    """A conversion error tied to a location in the attribute tree."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        path: tuple[str, ...] = (),
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.path = path

    @property
    def field_path(self) -> str:
        return format_path(self.path)


class MalformedAttributeError(_PathError):
    """Raised when an attribute value does not carry exactly one known type tag."""


class MaxDepthExceededError(_PathError):
    """Raised when the attribute tree is nested deeper than the limit."""


class SerializationError(ConversionError):
    """Raised when the converted value tree cannot be encoded as JSON."""


class InvalidStreamRecordError(ConversionError):
    """Raised when a stream record has no ``dynamodb`` section."""


def format_path(path: tuple[str, ...]) -> str:
    """Join field path segments into the dotted form used in diagnostics."""
    return PATH_SEPARATOR.join(path)


# Sanitized user-facing error message constants
ERR_MSG_MALFORMED_ATTRIBUTE = "malformed attribute value"
ERR_MSG_UNKNOWN_TYPE = "unknown attribute type"
ERR_MSG_DEPTH_EXCEEDED = "maximum nesting depth exceeded"
ERR_MSG_SERIALIZATION_FAILED = "JSON serialization failed"
ERR_MSG_INVALID_STREAM_RECORD = "invalid stream record"
