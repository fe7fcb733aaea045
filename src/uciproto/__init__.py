"""uciproto: Universal Chess Interface message model and codec.

- `from uciproto.uci import parse, serialize, Go, BestMove, ...`
- `from uciproto.uci.interop import to_chess_move` (python-chess conversion)

Shared utilities are in `uciproto.core`:
- `from uciproto.core import setup_logging, load_config`

Log records from this package are disabled until `setup_logging` is called.
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("uciproto")

# Re-export common utilities for convenience
from uciproto.core import load_config, save_config, setup_logging  # noqa: E402
from uciproto.uci import UciMessage, parse, parse_line, serialize  # noqa: E402

__all__ = [
    "UciMessage",
    "__version__",
    "load_config",
    "parse",
    "parse_line",
    "save_config",
    "setup_logging",
    "serialize",
]
