"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from atm_client.config.defaults import get_default_config
from atm_client.config.loader import ConfigLoader
from atm_client.config.validation import ConfigValidator
from atm_client.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.contract.address == "0x5FbDB2315678afecb367f032d93F642f64180aa3"
        assert config.contract.artifact_path is None
        assert config.ledger.unit_amount == 1
        assert config.ledger.unit_label == "ETH"
        assert config.targets.multipliers == ("2", "1.5", "1", "0.5")
        assert config.targets.decimals == 2

    def test_defaults_pass_validation(self) -> None:
        loader = ConfigLoader.create()
        config = loader._dataclass_to_dict(get_default_config())

        assert ConfigValidator.validate_config(config) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Without a file or overrides the defaults are returned."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["ledger"]["unit_amount"] == 1
        assert config["wallet"]["request_timeout"] == 30.0

    def test_file_overrides_defaults(self, tmp_path) -> None:
        """client.yaml values replace defaults, other keys survive."""
        (tmp_path / "client.yaml").write_text(
            "ledger:\n  unit_label: WEI\nwallet:\n  rpc_url: http://127.0.0.1:8545\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.load()

        assert config.ledger.unit_label == "WEI"
        assert config.ledger.unit_amount == 1
        assert config.wallet.rpc_url == "http://127.0.0.1:8545"

    def test_overrides_beat_file(self, tmp_path) -> None:
        """Explicit overrides have the highest priority."""
        (tmp_path / "client.yaml").write_text("ledger:\n  unit_amount: 2\n")
        loader = ConfigLoader.create(tmp_path)

        config = loader.load({"ledger": {"unit_amount": 3}})

        assert config.ledger.unit_amount == 3

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / "client.yaml").write_text("")

        assert ConfigLoader.create(tmp_path).load() == get_default_config()

    def test_non_mapping_file(self, tmp_path) -> None:
        (tmp_path / "client.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()

    def test_multipliers_normalized_to_text(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).load({"targets": {"multipliers": [3, 1.5]}})

        assert config.targets.multipliers == ("3", "1.5")

    def test_invalid_values_rejected(self, tmp_path) -> None:
        """Validation errors are collected into one ConfigurationError."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load({"ledger": {"unit_amount": 0}, "contract": {"address": "nope"}})

        fields = [err.field for err in exc_info.value.errors]
        assert fields == ["contract.address", "ledger.unit_amount"]

    def test_unknown_key_rejected(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load({"ledger": {"colour": "blue"}})


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_contract_params(self) -> None:
        params = {"address": "0x5FbDB2315678afecb367f032d93F642f64180aa3", "artifact_path": None}

        assert ConfigValidator.validate_contract_params(params) == []

    @pytest.mark.parametrize("address", [
        "5FbDB2315678afecb367f032d93F642f64180aa3",
        "0x5FbDB2315678afecb367f032d93F642f64180aa",
        "0xZZbDB2315678afecb367f032d93F642f64180aa3",
        42,
    ])
    def test_invalid_contract_address(self, address) -> None:
        errors = ConfigValidator.validate_contract_params({"address": address})

        assert len(errors) == 1
        assert errors[0].field == "contract.address"

    @pytest.mark.parametrize("amount", [0, -1, 1.5, True, "1"])
    def test_invalid_unit_amount(self, amount) -> None:
        errors = ConfigValidator.validate_ledger_params({"unit_amount": amount})

        assert len(errors) == 1
        assert "Must be a positive integer" in errors[0].message

    def test_invalid_unit_label(self) -> None:
        errors = ConfigValidator.validate_ledger_params({"unit_label": "  "})

        assert errors[0].field == "ledger.unit_label"

    def test_invalid_wallet_params(self) -> None:
        errors = ConfigValidator.validate_wallet_params({"rpc_url": "ftp://x", "request_timeout": 0})

        assert [err.field for err in errors] == ["wallet.rpc_url", "wallet.request_timeout"]

    def test_invalid_target_params(self) -> None:
        errors = ConfigValidator.validate_target_params({"multipliers": ["2", "abc", "nan"], "decimals": -1})

        assert [err.field for err in errors] == [
            "targets.multipliers", "targets.multipliers", "targets.decimals",
        ]

    def test_empty_multipliers(self) -> None:
        errors = ConfigValidator.validate_target_params({"multipliers": []})

        assert len(errors) == 1
        assert "non-empty" in errors[0].message

    def test_invalid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})

        assert [err.field for err in errors] == ["logging.level", "logging.format_json"]
