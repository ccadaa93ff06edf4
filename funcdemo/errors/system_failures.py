"""
System failure error classifications.

These exceptions represent failures while running demos, writing output or
loading configuration. They are not recoverable by retrying the same call.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DemoExecutionError(SystemFailureError):
    """Unexpected failure inside a single demo."""

    def __init__(self, message: str, demo_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.demo_name = demo_name


class OutputSinkError(SystemFailureError):
    """The output sink could not write a line."""

    def __init__(self, message: str, sink_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.sink_name = sink_name


class ConfigurationError(SystemFailureError):
    """Configuration failed validation or could not be parsed."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class UnknownDemoError(SystemFailureError):
    """A demo was requested by a name the runner does not know."""

    def __init__(self, message: str, demo_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.demo_name = demo_name
