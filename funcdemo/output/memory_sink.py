"""In-memory output sink."""

from typing import Optional

from ..models.results import DemoLine
from .base import BaseOutputSink


class MemorySink(BaseOutputSink):
    """Collects rendered lines in memory, for tests and embedding callers."""

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self.records: list[tuple[str, DemoLine]] = []

    def write_line(self, demo_name: str, line: DemoLine) -> None:
        self.records.append((demo_name, line))
        self._line_count += 1

    def lines(self, demo_name: Optional[str] = None) -> list[str]:
        """Rendered "<label>: <value>" lines, optionally for one demo only."""
        return [
            line.render()
            for name, line in self.records
            if demo_name is None or name == demo_name
        ]

    def clear(self) -> None:
        self.records.clear()
        self.reset_stats()

    def health_check(self) -> bool:
        return True
