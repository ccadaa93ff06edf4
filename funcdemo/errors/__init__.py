"""
Error classification for the demo runner.

Input errors describe bad values handed to a feature operation by the
caller. System failures describe problems running demos or writing their
output, which the runner records instead of continuing silently.
"""

from .input_errors import (
    InputError,
    InvalidInputError,
    AbsentValueError,
    StreamConsumedError,
)
from .system_failures import (
    SystemFailureError,
    DemoExecutionError,
    OutputSinkError,
    ConfigurationError,
    UnknownDemoError,
)

__all__ = [
    # Input Errors
    "InputError",
    "InvalidInputError",
    "AbsentValueError",
    "StreamConsumedError",
    # System Failures
    "SystemFailureError",
    "DemoExecutionError",
    "OutputSinkError",
    "ConfigurationError",
    "UnknownDemoError",
]
