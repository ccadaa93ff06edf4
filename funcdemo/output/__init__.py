"""Output sinks for demo lines"""

from .base import BaseOutputSink
from .memory_sink import MemorySink
from .stdout_sink import StdoutSink

__all__ = ["BaseOutputSink", "MemorySink", "StdoutSink"]
