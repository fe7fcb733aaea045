"""Core utilities shared by the codec and the CLI."""

from uciproto.core.configs import load_config, save_config
from uciproto.core.utils.logging import setup_logging

__all__ = ["load_config", "save_config", "setup_logging"]
