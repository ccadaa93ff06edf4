"""Base class for output sinks."""

from abc import ABC, abstractmethod
from typing import Any

from ..logging.config import get_logger
from ..models.results import DemoLine


class BaseOutputSink(ABC):
    """Base class for destinations that receive demo output lines."""

    def __init__(self, name: str):
        self.name = name
        self.logger = get_logger(f"funcdemo.output.{name}")
        self._line_count = 0
        self._error_count = 0

    @abstractmethod
    def write_line(self, demo_name: str, line: DemoLine) -> None:
        """
        Write one demo line.

        Args:
            demo_name: Demo the line belongs to
            line: Labelled value to write

        Raises:
            OutputSinkError: If the line could not be written
        """
        pass

    def write_header(self, demo_name: str) -> None:
        """Mark the start of a demo. Sinks without headers ignore this."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the sink can accept output."""
        pass

    def get_stats(self) -> dict[str, Any]:
        """Get sink statistics."""
        return {
            "name": self.name,
            "line_count": self._line_count,
            "error_count": self._error_count,
        }

    def reset_stats(self):
        """Reset sink statistics."""
        self._line_count = 0
        self._error_count = 0
