#!/usr/bin/env python3
"""
Basic Usage Example - funcdemo Example Runner

This script shows how to drive the example runner from Python code:
- Run individual demos with the built-in inputs
- Pass your own inputs, including the empty sequence
- Collect output in memory instead of printing it
- Inspect DemoResult values programmatically

Run: python examples/basic_usage.py
"""

from funcdemo.logging import configure_logging
from funcdemo.output import MemorySink
from funcdemo.runner import ExampleRunner


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 funcdemo - Basic Usage Demo")
    print("=" * 60)

    print("1. Running the aggregation demo on the default numbers...")
    runner = ExampleRunner()
    result = runner.run_aggregation_demo()
    print(f"   Status: {result.status.value}, value: {result.value}")
    print()

    print("2. Aggregating an empty sequence (mean has no value, nothing raises)...")
    result = runner.run_aggregation_demo([])
    print(f"   Mean: {result.value['mean']}")
    print()

    print("3. Collecting output in memory...")
    sink = MemorySink()
    quiet_runner = ExampleRunner(sink=sink)
    quiet_runner.run_filter_map_reduce_demo([1, 2, 3, 4, 5, 6])
    for line in sink.lines("filter_map_reduce"):
        print(f"   {line}")
    print()

    print("4. Optional values with a fallback...")
    absent = quiet_runner.run_optional_demo(None, "fallback")
    present = quiet_runner.run_optional_demo("x", "fallback")
    print(f"   Absent -> {absent.value}")
    print(f"   Present -> {present.value}")
    print()

    print("5. Running everything...")
    results = quiet_runner.run_all()
    failed = [r.name for r in results if not r.succeeded]
    print(f"   Ran {len(results)} demos, failed: {failed or 'none'}")
    print(f"   Sink stats: {sink.get_stats()}")


if __name__ == "__main__":
    main()
