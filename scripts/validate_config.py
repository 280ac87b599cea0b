#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quant_signals.config.loader import ConfigLoader
from quant_signals.config.validation import ConfigValidator, ValidationError


def validate_merged_config(overrides: Optional[dict] = None) -> List[ValidationError]:
    """Validate the merged configuration, optionally with overrides."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def report(label: str, errors: List[ValidationError]) -> bool:
    """Print validation results; True when valid."""
    if errors:
        print(f"❌ {label}: found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return False

    print(f"✅ {label} is valid")
    return True


def main():
    """Main validation function."""
    print("🔍 Validating quant_signals configuration...")

    loader = ConfigLoader.create()
    print(f"   Config directory: {loader.config_dir}")

    all_valid = report("Merged configuration", validate_merged_config())

    # Each risk level should be accepted as a scenario override
    print(f"\n📋 Testing risk level overrides...")
    for level in ("LOW", "MEDIUM", "HIGH"):
        overrides = {"scenario": {"risk_level": level}}
        all_valid = report(f"risk_level={level}", validate_merged_config(overrides)) and all_valid

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
