"""Logging configuration utilities.

The package disables its own loguru records on import, so programs that only
embed the codec see nothing. `setup_logging` is the opt-in: it installs the
sinks described by a `LoggingConfig` and re-enables the `uciproto` records.
"""

import sys
from pathlib import Path

from loguru import logger

from uciproto.core.configs.schema import LoggingConfig

PACKAGE = "uciproto"

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Install loguru sinks and enable uciproto's own log records.

    Args:
        config: Level, optional log file and its rotation/retention.
            Defaults to `LoggingConfig()` (INFO to stderr only).
    """
    config = config or LoggingConfig()

    # Replace whatever sinks were installed before, including loguru's default
    logger.remove()
    logger.add(sys.stderr, level=config.level, format=_CONSOLE_FORMAT, colorize=True)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=config.level,
            format=_FILE_FORMAT,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logger.enable(PACKAGE)
    logger.debug(f"Logging configured at level {config.level}, file={config.log_file}")
