"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from funcdemo.config.defaults import get_default_config
from funcdemo.logging.config import configure_logging
from funcdemo.output.memory_sink import MemorySink
from funcdemo.runner import ExampleRunner


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Route structlog output to stderr so it never mixes with demo output."""
    configure_logging(level="WARNING", include_timestamp=False)


@pytest.fixture
def sample_numbers() -> List[int]:
    """The canonical demo sequence."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def memory_sink() -> MemorySink:
    """Fresh in-memory sink."""
    return MemorySink()


@pytest.fixture
def runner(memory_sink: MemorySink) -> ExampleRunner:
    """Runner with default configuration writing into memory."""
    return ExampleRunner(config=get_default_config(), sink=memory_sink)
