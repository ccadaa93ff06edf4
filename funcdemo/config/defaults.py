"""Default configuration parameters for the example runner."""

from dataclasses import dataclass, field


DEMO_ORDER: tuple[str, ...] = (
    "predicate",
    "transform",
    "consumer",
    "supplier",
    "aggregation",
    "filter_map_reduce",
    "statistics",
    "optional",
    "datetime",
)


@dataclass(frozen=True)
class InputParams:
    """Literal inputs the demos run on when the caller supplies none."""
    numbers: tuple[int, ...] = (1, 2, 3, 4, 5)
    words: tuple[str, ...] = ("alpha", "beta", "gamma", "delta")
    predicate_input: int = 4
    transform_text: str = "lambda"
    transform_number: int = 7
    optional_fallback: str = "fallback"
    reference_time: str = "2014-03-18T12:00:00+00:00"   # Fixed instant for date/time demo
    display_timezone: str = "Europe/Berlin"


@dataclass(frozen=True)
class OutputParams:
    """Output sink parameters."""
    format: str = "text"              # text, json
    show_headers: bool = True         # "== name ==" line before each demo (text only)


@dataclass(frozen=True)
class RunnerParams:
    """Runner scheduling parameters."""
    enabled_demos: tuple[str, ...] = DEMO_ORDER
    stop_on_error: bool = False


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    inputs: InputParams = field(default_factory=InputParams)
    output: OutputParams = field(default_factory=OutputParams)
    runner: RunnerParams = field(default_factory=RunnerParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        inputs=InputParams(),
        output=OutputParams(),
        runner=RunnerParams(),
        logging=LoggingParams(),
    )


def config_from_dict(data: dict) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary."""
    inputs = dict(data.get("inputs", {}))
    for key in ("numbers", "words"):
        if key in inputs:
            inputs[key] = tuple(inputs[key])

    runner = dict(data.get("runner", {}))
    if "enabled_demos" in runner:
        runner["enabled_demos"] = tuple(runner["enabled_demos"])

    return DefaultConfig(
        inputs=InputParams(**inputs),
        output=OutputParams(**data.get("output", {})),
        runner=RunnerParams(**runner),
        logging=LoggingParams(**data.get("logging", {})),
    )
