"""
Input error classifications for feature operations.

These exceptions describe caller-supplied values that an operation cannot
accept. They are recoverable: the caller can retry with a valid value.
"""

from typing import Optional, Dict, Any


class InputError(Exception):
    """Base class for invalid caller input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(InputError):
    """Value has the wrong type or is None where a value is required."""

    def __init__(self, message: str, value: Any = None,
                 expected: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.expected = expected


class AbsentValueError(InputError):
    """A value was requested from an empty Optional."""

    def __init__(self, message: str = "No value present", **kwargs):
        super().__init__(message, **kwargs)


class StreamConsumedError(InputError):
    """A terminal operation was called on a stream that was already consumed."""

    def __init__(self, message: str = "Stream has already been consumed", **kwargs):
        super().__init__(message, **kwargs)
