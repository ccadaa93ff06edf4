#!/usr/bin/env python3
"""
Configuration Demo - funcdemo Example Runner

This script demonstrates the configuration system, showing how to:
- Inspect the built-in defaults
- Layer YAML file overrides and explicit overrides on top
- Validate configuration parameters

Run: python examples/configuration_demo.py
"""

import tempfile
from pathlib import Path

import yaml

from funcdemo.config.defaults import get_default_config
from funcdemo.config.loader import ConfigLoader
from funcdemo.config.validation import ConfigValidator
from funcdemo.errors import ConfigurationError
from funcdemo.logging import configure_logging
from funcdemo.output import MemorySink
from funcdemo.runner import ExampleRunner


def demonstrate_default_config():
    """Show the default configuration structure."""
    print("⚙️ DEFAULT CONFIGURATION")
    print("=" * 50)

    config = get_default_config()
    print(f"   numbers: {list(config.inputs.numbers)}")
    print(f"   optional fallback: {config.inputs.optional_fallback}")
    print(f"   output format: {config.output.format}")
    print(f"   enabled demos: {', '.join(config.runner.enabled_demos)}")
    print()


def demonstrate_layering():
    """Show file and explicit overrides taking precedence over defaults."""
    print("📚 CONFIGURATION PRECEDENCE")
    print("=" * 50)

    with tempfile.TemporaryDirectory() as tmp:
        config_dir = Path(tmp)
        with open(config_dir / "demos.yaml", "w") as f:
            yaml.safe_dump({"inputs": {"numbers": [10, 20, 30]}}, f)

        loader = ConfigLoader.create(config_dir)
        config = loader.load({"inputs": {"optional_fallback": "from overrides"}})

    print(f"   numbers (file): {list(config.inputs.numbers)}")
    print(f"   fallback (explicit): {config.inputs.optional_fallback}")

    sink = MemorySink()
    ExampleRunner(config=config, sink=sink).run_aggregation_demo()
    for line in sink.lines():
        print(f"   {line}")
    print()


def demonstrate_validation():
    """Show configuration validation."""
    print("✅ CONFIGURATION VALIDATION")
    print("=" * 50)

    bad_config = {
        "inputs": {"numbers": [1, "two", 3]},
        "output": {"format": "xml"},
        "runner": {"enabled_demos": ["predicate", "teleport"]},
    }
    for error in ConfigValidator.validate_config(bad_config):
        print(f"   ❌ {error.field}: {error.message} (value: {error.value})")

    try:
        ConfigLoader.create(Path("/nonexistent")).load({"output": {"format": "xml"}})
    except ConfigurationError as e:
        print(f"   Loader refused: {e}")
    print()


def main():
    configure_logging(level="WARNING")
    demonstrate_default_config()
    demonstrate_layering()
    demonstrate_validation()


if __name__ == "__main__":
    main()
