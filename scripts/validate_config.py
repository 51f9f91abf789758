#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

from atm_client.config.loader import ConfigLoader
from atm_client.config.validation import ConfigValidator, ValidationError
from atm_client.ledger.artifacts import load_contract_abi
from atm_client.errors import ConfigurationError


def validate_client_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration found in config_dir."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating ATM client configuration...")

    try:
        errors = validate_client_config(config_dir)
    except ConfigurationError as e:
        print(f"❌ Could not read configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = ConfigLoader.create(config_dir).load()
    if config.contract.artifact_path:
        try:
            abi = load_contract_abi(config.contract.artifact_path)
        except ConfigurationError as e:
            print(f"❌ {e}")
            sys.exit(1)
        print(f"✅ Contract artifact has {len(abi)} ABI entries")

    print(f"✅ Contract {config.contract.address} configuration is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
