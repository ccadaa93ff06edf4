"""Data models for demo output and results"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from ..errors import DemoExecutionError

NO_VALUE = "no value"


def format_value(value: Any) -> str:
    """
    Render a value for the "<label>: <value>" output format.

    None renders as "no value", booleans in lower case, and containers
    element by element in their own order, so output is stable.
    """
    if value is None:
        return NO_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + items + "}"
    return str(value)


@dataclass(frozen=True)
class DemoLine:
    """One logical step of a demo"""
    label: str
    value: Any

    def render(self) -> str:
        return f"{self.label}: {format_value(self.value)}"


class DemoStatus(Enum):
    """Demo execution status"""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DemoResult:
    """Outcome of running a single demo"""
    name: str
    status: DemoStatus
    lines: list[DemoLine] = field(default_factory=list)
    value: Any = None                  # Primary result of the demo, for programmatic callers
    error: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.status == DemoStatus.SUCCESS

    def raise_for_status(self) -> None:
        """Raise DemoExecutionError if the demo failed."""
        if self.status == DemoStatus.FAILED:
            raise DemoExecutionError(
                f"Demo {self.name} failed: {self.error}",
                demo_name=self.name
            )

    def rendered_lines(self) -> list[str]:
        return [line.render() for line in self.lines]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "lines": self.rendered_lines(),
            "error": self.error,
            "duration_ms": self.duration_ms,
        }
