"""Resource limit and formatting constants for attribute-to-JSON conversion."""

DEFAULT_MAX_RECURSION_DEPTH = 100
"""Maximum List/Map nesting depth (CWE-674 prevention).

DynamoDB itself stops at 32 levels, so no stored item comes near this.
"""

PATH_SEPARATOR = "."
"""Joins field path segments in error messages."""

JSON_SEPARATORS = (",", ":")
"""Compact separators, no whitespace between tokens."""
