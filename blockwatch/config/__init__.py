"""Configuration module for blockwatch."""

from blockwatch.config.loader import load_config, get_config_path, save_config
from blockwatch.config.schema import Config
from blockwatch.config.access import apply_overrides, resolve_config

__all__ = ["Config", "load_config", "save_config", "get_config_path", "apply_overrides", "resolve_config"]
