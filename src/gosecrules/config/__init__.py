"""Configuration loading, schema, and defaults."""

from gosecrules.config.loader import ConfigError, load_config
from gosecrules.config.schema import GosecRulesConfig, OutputConfig, RulesConfig

__all__ = [
    "ConfigError",
    "GosecRulesConfig",
    "OutputConfig",
    "RulesConfig",
    "load_config",
]
