"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ValidationError


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _load_symbols_section(self) -> dict[str, Any]:
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}

        if not isinstance(symbols_config, dict):
            raise self._malformed("symbols.yaml", symbols_config)

        symbols = symbols_config.get("symbols")
        if symbols is None:
            return {}
        if not isinstance(symbols, dict):
            raise self._malformed("symbols", symbols)

        return symbols

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """
        Load symbol-specific configuration overrides.

        Raises:
            ConfigurationError: If symbols.yaml does not hold mappings where expected
        """
        symbol_config = self._load_symbols_section().get(symbol)
        if symbol_config is None:
            return {}
        if not isinstance(symbol_config, dict):
            raise self._malformed(f"symbols.{symbol}", symbol_config)

        return symbol_config

    def _malformed(self, field: str, value: Any) -> ConfigurationError:
        error = ValidationError(field=field, message="Must be a mapping", value=value)
        return ConfigurationError(
            f"Malformed {self.config_dir / 'symbols.yaml'}: {field} must be a mapping",
            errors=[error],
            context={"field": field}
        )

    def configured_symbols(self) -> list[str]:
        """Symbols that have overrides in symbols.yaml."""
        return sorted(self._load_symbols_section())

    def merge_config(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides from symbols.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        symbol_config = self.load_symbol_config(symbol)
        config = self._deep_merge(config, symbol_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
