#!/usr/bin/env python3
"""
Run All Examples - funcdemo Example Runner

Runs every demo in sequence and prints a summary with per-demo timing and
any failures.

Run: python examples/run_all_examples.py
"""

import sys
import traceback

from funcdemo.logging import configure_logging
from funcdemo.runner import ExampleRunner


def print_summary(results):
    """Print a summary of all demo results."""
    print(f"\n{'='*60}")
    print("📊 DEMO SUMMARY")
    print(f"{'='*60}")

    total = len(results)
    successful = sum(1 for r in results if r.succeeded)

    print(f"  Total demos: {total}")
    print(f"  Successful: {successful} ✅")
    print(f"  Failed: {total - successful} ❌")
    if total:
        print(f"  Success rate: {(successful/total)*100:.1f}%")

    print("\n📋 Individual Results:")
    for i, result in enumerate(results, 1):
        icon = "✅" if result.succeeded else "❌"
        print(f"  {i}. {result.name}: {icon} {result.status.value} ({result.duration_ms:.2f}ms)")
        if result.error:
            print(f"     Error: {result.error}")


def main():
    """Main function to run all demos."""
    configure_logging(level="WARNING")
    try:
        runner = ExampleRunner()
        results = runner.run_all()
        print_summary(results)
    except KeyboardInterrupt:
        print("\n\n⏹️ Demo run interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\n💥 Unexpected error in demo runner: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
