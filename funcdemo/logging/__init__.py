"""
Logging configuration and utilities for the demo runner.
"""
from .config import configure_logging, get_demo_logger, get_logger, log_demo_result

__all__ = ["configure_logging", "get_logger", "get_demo_logger", "log_demo_result"]
