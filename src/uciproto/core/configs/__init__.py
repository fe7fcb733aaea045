"""Configuration management utilities."""

from uciproto.core.configs.loader import load_app_config, load_config, save_config
from uciproto.core.configs.schema import (
    AppConfig,
    CodecConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    "AppConfig",
    "CodecConfig",
    "LoggingConfig",
    "config_from_dict",
    "config_to_dict",
    "load_app_config",
    "load_config",
    "save_config",
]
