#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from finview_app.config.loader import ConfigLoader
from finview_app.config.validation import ConfigValidator, ValidationError
from finview_app.data.history import HistoricalDataStore
from finview_app.errors import ConfigurationError, DataQualityError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating FinView configuration...")

    all_valid = True

    try:
        errors = validate_config_dir(config_dir)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Configuration is valid")
    except ConfigurationError as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    if all_valid:
        print("\n📊 Checking bundled snapshots...")
        try:
            config = ConfigLoader.create(config_dir).load()
            store = HistoricalDataStore.load(config)
            for year in config.snapshots.years:
                historical = store.for_year(year)
                rows = {name: len(points) for name, points in historical.series.items()}
                print(f"✅ {year}: {rows}")
        except (ConfigurationError, DataQualityError) as e:
            print(f"❌ Snapshot check failed: {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
