"""Text stream output sink."""

import json
import sys
from typing import Any, Optional, TextIO

from ..errors import OutputSinkError
from ..models.results import DemoLine, format_value
from .base import BaseOutputSink

FORMATS = ("text", "json")


class StdoutSink(BaseOutputSink):
    """Writes demo lines to stdout (or any text stream)."""

    def __init__(self, name: str = "stdout", format: str = "text",
                 show_headers: bool = True, stream: Optional[TextIO] = None):
        super().__init__(name)
        if format not in FORMATS:
            raise OutputSinkError(
                f"Unsupported output format: {format}",
                sink_name=name,
                context={"supported": list(FORMATS)}
            )
        self.format = format
        self.show_headers = show_headers
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so that redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_header(self, demo_name: str) -> None:
        if self.format == "text" and self.show_headers:
            self._emit(f"== {demo_name} ==", demo_name)

    def write_line(self, demo_name: str, line: DemoLine) -> None:
        """Write a line in the configured format."""
        self._emit(self._format_line(demo_name, line), demo_name)
        self._line_count += 1

    def _format_line(self, demo_name: str, line: DemoLine) -> str:
        if self.format == "text":
            return line.render()
        record = {
            "demo": demo_name,
            "label": line.label,
            "value": self._json_value(line.value),
        }
        return json.dumps(record)

    def _json_value(self, value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, (list, tuple)):
            return [self._json_value(v) for v in value]
        if isinstance(value, dict):
            return {format_value(k): self._json_value(v) for k, v in value.items()}
        return format_value(value)

    def _emit(self, text: str, demo_name: str) -> None:
        try:
            print(text, file=self.stream, flush=True)
        except (OSError, ValueError) as e:
            self._error_count += 1
            self.logger.error(
                "Failed to write demo output",
                sink_name=self.name,
                demo_name=demo_name,
                error=str(e)
            )
            raise OutputSinkError(
                f"Write to {self.name} failed: {e}",
                sink_name=self.name
            ) from e

    def health_check(self) -> bool:
        """Check if the stream is writable."""
        try:
            return self.stream.writable()
        except (OSError, ValueError):
            return False
