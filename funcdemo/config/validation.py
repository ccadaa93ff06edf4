"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .defaults import DEMO_ORDER

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_input_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demo input parameters."""
        errors = []

        if "numbers" in params:
            value = params["numbers"]
            if not isinstance(value, (list, tuple)) or not all(_is_int(v) for v in value):
                errors.append(ValidationError(
                    field="inputs.numbers",
                    message="Must be a list of integers",
                    value=value
                ))

        if "words" in params:
            value = params["words"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                errors.append(ValidationError(
                    field="inputs.words",
                    message="Must be a list of strings",
                    value=value
                ))

        for key in ("predicate_input", "transform_number"):
            if key in params and not _is_int(params[key]):
                errors.append(ValidationError(
                    field=f"inputs.{key}",
                    message="Must be an integer",
                    value=params[key]
                ))

        for key in ("transform_text", "optional_fallback"):
            if key in params and not isinstance(params[key], str):
                errors.append(ValidationError(
                    field=f"inputs.{key}",
                    message="Must be a string",
                    value=params[key]
                ))

        if "reference_time" in params:
            value = params["reference_time"]
            try:
                parsed = datetime.fromisoformat(str(value))
                if parsed.tzinfo is None:
                    raise ValueError("naive timestamp")
            except ValueError:
                errors.append(ValidationError(
                    field="inputs.reference_time",
                    message="Must be an ISO8601 timestamp with UTC offset",
                    value=value
                ))

        if "display_timezone" in params:
            value = params["display_timezone"]
            try:
                ZoneInfo(str(value))
            except (ZoneInfoNotFoundError, ValueError, OSError):
                errors.append(ValidationError(
                    field="inputs.display_timezone",
                    message="Must be an IANA timezone name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "format" in params and params["format"] not in OUTPUT_FORMATS:
            errors.append(ValidationError(
                field="output.format",
                message=f"Must be one of {', '.join(OUTPUT_FORMATS)}",
                value=params["format"]
            ))

        if "show_headers" in params and not isinstance(params["show_headers"], bool):
            errors.append(ValidationError(
                field="output.show_headers",
                message="Must be a boolean",
                value=params["show_headers"]
            ))

        return errors

    @staticmethod
    def validate_runner_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate runner parameters."""
        errors = []

        if "enabled_demos" in params:
            value = params["enabled_demos"]
            if not isinstance(value, (list, tuple)):
                errors.append(ValidationError(
                    field="runner.enabled_demos",
                    message="Must be a list of demo names",
                    value=value
                ))
            else:
                unknown = [name for name in value if name not in DEMO_ORDER]
                if unknown:
                    errors.append(ValidationError(
                        field="runner.enabled_demos",
                        message=f"Unknown demo names: {', '.join(map(str, unknown))}",
                        value=value
                    ))

        if "stop_on_error" in params and not isinstance(params["stop_on_error"], bool):
            errors.append(ValidationError(
                field="runner.stop_on_error",
                message="Must be a boolean",
                value=params["stop_on_error"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="logging.format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = (
            ("inputs", ConfigValidator.validate_input_params),
            ("output", ConfigValidator.validate_output_params),
            ("runner", ConfigValidator.validate_runner_params),
            ("logging", ConfigValidator.validate_logging_params),
        )

        for section, validate in section_validators:
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
