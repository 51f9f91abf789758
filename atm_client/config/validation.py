"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
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
    def validate_contract_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate contract binding parameters."""
        errors = []

        if "address" in params:
            value = params["address"]
            if not isinstance(value, str) or not ADDRESS_PATTERN.match(value):
                errors.append(ValidationError(
                    field="contract.address",
                    message="Must be a 0x-prefixed 20-byte hex address",
                    value=value
                ))

        if params.get("artifact_path") is not None:
            value = params["artifact_path"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="contract.artifact_path",
                    message="Must be a non-empty path",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ledger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate deposit/withdraw parameters."""
        errors = []

        if "unit_amount" in params:
            value = params["unit_amount"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="ledger.unit_amount",
                    message="Must be a positive integer",
                    value=value
                ))

        if "unit_label" in params:
            value = params["unit_label"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="ledger.unit_label",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_wallet_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate wallet provider parameters."""
        errors = []

        if params.get("rpc_url") is not None:
            value = params["rpc_url"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="wallet.rpc_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "request_timeout" in params:
            value = params["request_timeout"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="wallet.request_timeout",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_target_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate target calculator parameters."""
        errors = []

        if "multipliers" in params:
            value = params["multipliers"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="targets.multipliers",
                    message="Must be a non-empty list of numbers",
                    value=value
                ))
            else:
                for multiplier in value:
                    try:
                        parsed = Decimal(str(multiplier))
                    except InvalidOperation:
                        parsed = None
                    if parsed is None or not parsed.is_finite():
                        errors.append(ValidationError(
                            field="targets.multipliers",
                            message="Each multiplier must be a finite number",
                            value=multiplier
                        ))

        if "decimals" in params:
            value = params["decimals"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(ValidationError(
                    field="targets.decimals",
                    message="Must be a non-negative integer",
                    value=value
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
        """Validate a complete merged configuration."""
        errors = []

        errors.extend(ConfigValidator.validate_contract_params(config.get("contract", {})))
        errors.extend(ConfigValidator.validate_ledger_params(config.get("ledger", {})))
        errors.extend(ConfigValidator.validate_wallet_params(config.get("wallet", {})))
        errors.extend(ConfigValidator.validate_target_params(config.get("targets", {})))
        errors.extend(ConfigValidator.validate_logging_params(config.get("logging", {})))

        return errors
