"""Validation code constants for asyncapi_types.api.validate().

These constants prevent stringly-typed error codes and ensure
client code uses the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation error and warning codes."""

    # Errors (blocking)
    INVALID_STRUCTURE = "INVALID_STRUCTURE"
    INVALID_SYNTAX = "INVALID_SYNTAX"
    UNRESOLVED_REFERENCE = "UNRESOLVED_REFERENCE"
    CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # Warnings (non-blocking)
    EXTERNAL_REFERENCE = "EXTERNAL_REFERENCE"
    UNKNOWN_VARIANT = "UNKNOWN_VARIANT"
    NON_STANDARD_EXTENSION = "NON_STANDARD_EXTENSION"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
