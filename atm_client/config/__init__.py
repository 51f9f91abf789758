"""
Configuration module.

Defaults, YAML overrides and validation for the ATM client.
"""
from .defaults import ClientConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["ClientConfig", "ConfigLoader", "get_default_config"]
