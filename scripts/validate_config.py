#!/usr/bin/env python3
"""Validate the indicator parameters configured in config/symbols.yaml."""

import sys

from indicator_engine.config.loader import ConfigLoader
from indicator_engine.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> list[ValidationError]:
    """Validate the merged configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main() -> int:
    """Main validation function."""
    print("🔍 Validating indicator configuration...")

    loader = ConfigLoader.create()
    symbols = loader.configured_symbols()
    # an unlisted symbol exercises the pure defaults
    symbols.append("UNKNOWN-SYMBOL")

    all_valid = True
    for symbol in symbols:
        print(f"\n📊 Validating {symbol}...")
        errors = validate_symbol_config(loader, symbol)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        return 0

    print("\n❌ Configuration validation failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
