"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_KNOWN_FIELDS = {
    "rsi": {"period"},
    "macd": {"fast_period", "slow_period", "signal_period"},
    "stochastic": {"k_period", "d_period"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_periods(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate that every known period field in a section is a positive integer."""
        errors = []

        for field_name, value in params.items():
            if field_name not in _KNOWN_FIELDS[section]:
                errors.append(ValidationError(
                    field=f"{section}.{field_name}",
                    message="Unknown parameter",
                    value=value
                ))
            elif not _is_positive_int(value):
                errors.append(ValidationError(
                    field=f"{section}.{field_name}",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD parameters, including fast/slow ordering."""
        errors = ConfigValidator.validate_periods("macd", params)
        if errors:
            return errors

        fast = params.get("fast_period")
        slow = params.get("slow_period")
        if fast is not None and slow is not None and fast >= slow:
            errors.append(ValidationError(
                field="macd.fast_period",
                message="Must be smaller than slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in _KNOWN_FIELDS:
                errors.append(ValidationError(field=section, message="Unknown section", value=value))
            elif not isinstance(value, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=value))

        if errors:
            return errors

        if "rsi" in config:
            errors.extend(ConfigValidator.validate_periods("rsi", config["rsi"]))

        if "macd" in config:
            errors.extend(ConfigValidator.validate_macd_params(config["macd"]))

        if "stochastic" in config:
            errors.extend(ConfigValidator.validate_periods("stochastic", config["stochastic"]))

        return errors
