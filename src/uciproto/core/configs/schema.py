"""Strongly-typed configuration schemas for uciproto.

These dataclasses provide validation, IDE support, and serve as the
single source of truth for all configuration options.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for UCI encoding and decoding.

    Attributes:
        legacy_black_time_token: Emit black's clock as `bt` instead of `btime`.
            Only for peers that were built against the old token.
        accept_legacy_black_time_token: Let the decoder read `bt` as `btime`.
    """

    legacy_black_time_token: bool = False
    accept_legacy_black_time_token: bool = True

    @property
    def black_time_token(self) -> str:
        return "bt" if self.legacy_black_time_token else "btime"


@dataclass
class LoggingConfig:
    """Configuration for loguru sinks."""

    level: str = "INFO"
    log_file: str | None = None
    rotation: str = "10 MB"
    retention: str = "1 week"

    def __post_init__(self) -> None:
        """Normalize and validate the level name."""
        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            msg = f"Unknown log level {self.level!r}, expected one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)


@dataclass
class AppConfig:
    """Top-level configuration combining all sub-configs."""

    codec: CodecConfig = field(default_factory=CodecConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_from_dict(data: dict[str, Any]) -> AppConfig:
    """Create AppConfig from a dictionary (e.g., from OmegaConf).

    Args:
        data: Dictionary with configuration values.

    Returns:
        AppConfig instance.

    Raises:
        TypeError: If a section contains an unknown key.
    """
    return AppConfig(
        codec=CodecConfig(**data.get("codec", {})),
        logging=LoggingConfig(**data.get("logging", {})),
    )


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to a dictionary for serialization."""
    return asdict(config)
