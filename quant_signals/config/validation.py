"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..data.parsers import parse_observation, parse_risk_level
from ..errors import DataQualityError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_scenario_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demonstration scenario parameters."""
        errors = []

        if "title" in params and not isinstance(params["title"], str):
            errors.append(ValidationError(
                field="title",
                message="Must be a string",
                value=params["title"]
            ))

        if "risk_level" in params:
            value = params["risk_level"]
            try:
                parse_risk_level(value)
            except DataQualityError as e:
                errors.append(ValidationError(
                    field="risk_level",
                    message=str(e),
                    value=value
                ))

        if "observations" in params:
            value = params["observations"]
            if not isinstance(value, list):
                errors.append(ValidationError(
                    field="observations",
                    message="Must be a list of observation records",
                    value=value
                ))
            else:
                for index, record in enumerate(value):
                    try:
                        parse_observation(record)
                    except DataQualityError as e:
                        errors.append(ValidationError(
                            field=f"observations[{index}]",
                            message=str(e),
                            value=record
                        ))

        return errors

    @staticmethod
    def validate_render_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console rendering parameters."""
        errors = []

        if "underline_char" in params:
            value = params["underline_char"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="underline_char",
                    message="Must be a single character",
                    value=value
                ))

        if "underline_width" in params:
            value = params["underline_width"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(ValidationError(
                    field="underline_width",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("logging", ConfigValidator.validate_logging_params),
            ("scenario", ConfigValidator.validate_scenario_params),
            ("render", ConfigValidator.validate_render_params),
        )

        for section, validator in sections:
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            for error in validator(params):
                errors.append(ValidationError(
                    field=f"{section}.{error.field}",
                    message=error.message,
                    value=error.value
                ))

        return errors
