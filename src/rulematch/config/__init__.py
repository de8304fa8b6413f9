"""Configuration loading, schema, and defaults."""

from rulematch.config.loader import ConfigError, find_config_file, load_config
from rulematch.config.schema import OUTPUT_FORMATS, OutputFormat, RulematchConfig

__all__ = [
    "ConfigError",
    "OUTPUT_FORMATS",
    "OutputFormat",
    "RulematchConfig",
    "find_config_file",
    "load_config",
]
