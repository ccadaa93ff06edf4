"""Result models for demo execution"""

from .results import DemoLine, DemoResult, DemoStatus, format_value

__all__ = ["DemoLine", "DemoResult", "DemoStatus", "format_value"]
