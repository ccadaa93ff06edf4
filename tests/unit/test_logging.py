"""Tests for structured logging of demo results."""

import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import Mock

import structlog
from structlog.testing import capture_logs

from funcdemo.logging.config import get_demo_logger, log_demo_result
from funcdemo.output.memory_sink import MemorySink
from funcdemo.runner import ExampleRunner


class TestLogDemoResult:
    """Test log_demo_result field binding and level selection."""

    def setup_method(self):
        self.bound = Mock()
        self.logger = Mock()
        self.logger.bind.return_value = self.bound

    def test_success_logs_info(self):
        log_demo_result(self.logger, "predicate", True, 5, 1.23456)

        self.logger.bind.assert_called_once_with(
            demo_name="predicate",
            status="SUCCESS",
            line_count=5,
            duration_ms=1.235,
        )
        self.bound.info.assert_called_once_with("Demo completed")
        self.bound.warning.assert_not_called()

    def test_failure_logs_warning(self):
        log_demo_result(self.logger, "optional", False, 0, 0.5)

        assert self.logger.bind.call_args.kwargs["status"] == "FAILED"
        self.bound.warning.assert_called_once_with("Demo failed")

    def test_context_is_bound(self):
        log_demo_result(self.logger, "optional", True, 1, 0.1, context={"k": "v"})
        self.bound.bind.assert_called_once_with(context={"k": "v"})


class TestRunnerLogging:
    """The runner emits one structured event per demo."""

    def test_events_per_demo(self):
        runner = ExampleRunner(sink=MemorySink())
        with capture_logs() as logs:
            runner.demo_logger = get_demo_logger("test")
            runner.run_all(["predicate", "optional"])

        completed = [entry for entry in logs if entry["event"] == "Demo completed"]
        assert [entry["demo_name"] for entry in completed] == ["predicate", "optional"]
        assert all(entry["subsystem"] == "demo_runner" for entry in completed)
        assert all(entry["status"] == "SUCCESS" for entry in completed)

    def test_failure_event(self):
        runner = ExampleRunner(sink=MemorySink())
        with capture_logs() as logs:
            runner.demo_logger = get_demo_logger("test")
            runner.logger = structlog.get_logger("test")
            runner.run_aggregation_demo(["x"])

        levels = {entry["log_level"] for entry in logs}
        assert "error" in levels
        assert "warning" in levels


EMBEDDED_RUN = textwrap.dedent("""
    from pathlib import Path

    from funcdemo.config.loader import ConfigLoader
    from funcdemo.runner import ExampleRunner

    config = ConfigLoader.create(Path("/nonexistent")).load({"logging": {"level": "INFO"}})
    ExampleRunner(config=config).run_aggregation_demo()
""")


class TestUnconfiguredLogging:
    """A runner used without configure_logging() keeps stdout clean."""

    def test_logs_go_to_stderr(self):
        completed = subprocess.run(
            [sys.executable, "-c", EMBEDDED_RUN],
            cwd=Path(__file__).resolve().parents[2],
            capture_output=True,
            text=True,
            check=True,
        )

        assert completed.stdout.splitlines() == [
            "== aggregation ==",
            "input: [1, 2, 3, 4, 5]",
            "count: 5",
            "sum: 15",
            "mean: 3.0",
        ]
        assert "Demo completed" in completed.stderr
